"""
Test fixtures for poseutils.

This module provides reference matrix strings and utilities for
building rotation-translation matrices with known Euler angles.
"""

from .matrices import (
    EXAMPLE_STRING,
    IDENTITY_STRING,
    make_matrix,
    zyx_rotation,
)

__all__ = ["EXAMPLE_STRING", "IDENTITY_STRING", "make_matrix", "zyx_rotation"]

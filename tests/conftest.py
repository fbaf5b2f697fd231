"""
Pytest configuration and fixtures for poseutils tests.

This module provides shared fixtures and configuration for testing the
poseutils package, including reference matrix strings and the matrices
they describe.
"""

import numpy as np
import pytest

from poseutils.matrix import RotationTranslationMatrix

from fixtures import make_matrix, zyx_rotation


@pytest.fixture
def identity_matrix() -> RotationTranslationMatrix:
    """The identity rotation with a zero translation."""
    return RotationTranslationMatrix.from_array(np.eye(3, 4))


@pytest.fixture
def example_matrix() -> RotationTranslationMatrix:
    """The matrix described by EXAMPLE_STRING."""
    return RotationTranslationMatrix(
        1.0, 0.0, 0.0, 0.0,
        0.0, 0.99975536, -0.02211853, 35.79052608,
        0.0, 0.02211853, 0.99975536, 302.07035776,
    )


@pytest.fixture
def rotated_matrix() -> RotationTranslationMatrix:
    """
    A proper rotation with roll=10°, pitch=-25°, yaw=135° and a
    non-zero translation.
    """
    rotation = zyx_rotation(*np.radians((10, -25, 135)))
    return make_matrix(rotation, (1.5, -2.25, 42.0))


@pytest.fixture
def params_file(tmp_path):
    """
    Write a minimal YAML parameter file.

    Args:
        tmp_path: pytest fixture providing temporary directory

    Returns:
        Path: path to the parameter file
    """
    path = tmp_path / "params.yml"
    path.write_text(
        "precision: 6\n"
        "show_radians: true\n"
        "insight:\n"
        "  model: test-model\n"
        "  timeout: 5\n"
    )
    return path


def pytest_configure(config):
    """
    Pytest hook for configuration.

    This adds custom markers.
    """
    config.addinivalue_line(
        "markers", "unit: tests of a single function or class"
    )
    config.addinivalue_line(
        "markers", "cli: tests running the command-line scripts"
    )

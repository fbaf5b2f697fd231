"""
Tait-Bryan (ZYX) decomposition of a 3x4 rigid-body transformation.

The rotation block is read as R = Rz(yaw) @ Ry(pitch) @ Rx(roll), so
that:
    pitch = atan2(-r31, hypot(r32, r33))
    roll = atan2(r32, r33)
    yaw = atan2(r21, r11)

No gimbal lock handling is done: as pitch approaches +/-90 degrees,
roll and yaw become coupled and their split is whatever the formulas
above give.
"""

from typing import NamedTuple

import numpy as np

from .matrix import RotationTranslationMatrix


class EulerAngles(NamedTuple):
    roll: float
    pitch: float
    yaw: float


class Translation(NamedTuple):
    x: float
    y: float
    z: float


class DecompositionResult(NamedTuple):
    """
    The outcome of decompose_matrix(). Degree values are always derived
    from the radian ones.
    """
    matrix: RotationTranslationMatrix
    euler_radians: EulerAngles
    euler_degrees: EulerAngles
    translation: Translation

    def to_dict(self) -> dict:
        """Return the result as a nested dictionary of floats."""
        return {
            "matrix": self.matrix.to_dict(),
            "euler_radians": dict(self.euler_radians._asdict()),
            "euler_degrees": dict(self.euler_degrees._asdict()),
            "translation": dict(self.translation._asdict()),
        }


def rad_to_deg(angle: float) -> float:
    """Convert an angle from radians to degrees."""
    return angle * 180 / np.pi


def _atan2(y: float, x: float) -> float:
    # atan2(0, 0) is pinned to +0, whatever the signs of the zeros.
    if y == 0 and x == 0:
        return 0.0
    return float(np.arctan2(y, x))


def decompose_matrix(matrix: RotationTranslationMatrix) -> DecompositionResult:
    """
    Decompose a 3x4 transformation into ZYX Euler angles and a
    translation vector.

    The rotation block is not checked for orthonormality, any matrix
    with finite entries gives a result.

    Args:
        matrix (RotationTranslationMatrix): the transformation.

    Returns:
        DecompositionResult: the matrix, the (roll, pitch, yaw) angles in
        radians and degrees, and the (x, y, z) translation.
    """
    m = matrix
    pitch = float(np.arctan2(-m.r31, np.hypot(m.r32, m.r33)))
    roll = _atan2(m.r32, m.r33)
    yaw = _atan2(m.r21, m.r11)

    radians = EulerAngles(roll=roll, pitch=pitch, yaw=yaw)
    degrees = EulerAngles(*(rad_to_deg(angle) for angle in radians))

    return DecompositionResult(
        matrix=matrix,
        euler_radians=radians,
        euler_degrees=degrees,
        translation=Translation(x=m.tx, y=m.ty, z=m.tz),
    )

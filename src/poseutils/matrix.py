import math
import re
from typing import NamedTuple

import numpy as np

# Marker found at the start of the exported strings, carries no value.
_PREFIX_PATTERN = re.compile(r"^9:\s*")
_SEPARATOR_PATTERN = re.compile(r"[\s,]+")
# plain decimal notation with an optional exponent, no "_" grouping
_NUMBER_PATTERN = re.compile(
    r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII
)

MATRIX_FIELDS = (
    "r11", "r12", "r13", "tx",
    "r21", "r22", "r23", "ty",
    "r31", "r32", "r33", "tz",
)


class RotationTranslationMatrix(NamedTuple):
    """
    A 3x4 rigid-body transformation, stored row-major:

        r11 r12 r13 tx
        r21 r22 r23 ty
        r31 r32 r33 tz

    The 3x3 block is assumed to be a rotation matrix but this is never
    enforced, see is_rotation_matrix() for an advisory check.
    """
    r11: float
    r12: float
    r13: float
    tx: float
    r21: float
    r22: float
    r23: float
    ty: float
    r31: float
    r32: float
    r33: float
    tz: float

    @classmethod
    def from_array(
            cls,
            data: np.ndarray | list | tuple
    ) -> "RotationTranslationMatrix":
        """
        Factory method to create a matrix from a (3, 4) array or any
        flat sequence of 12 values in row-major order.

        Raises:
            ValueError: if data does not hold exactly 12 values.
        """
        values = np.asarray(data, dtype=float).ravel()
        if values.size != len(MATRIX_FIELDS):
            raise ValueError(
                f"Expected {len(MATRIX_FIELDS)} values, got {values.size}."
            )
        return cls(*(float(v) for v in values))

    @classmethod
    def from_dict(cls, data: dict) -> "RotationTranslationMatrix":
        """Factory method to create a matrix from a dictionary."""
        return cls(**{key: float(data[key]) for key in MATRIX_FIELDS})

    def to_dict(self) -> dict:
        """Return the 12 fields as a dictionary."""
        return dict(self._asdict())

    def to_array(self) -> np.ndarray:
        """Return the full (3, 4) array."""
        return np.array(self, dtype=float).reshape(3, 4)

    @property
    def rotation(self) -> np.ndarray:
        """The (3, 3) rotation block."""
        return self.to_array()[:, :3]

    @property
    def translation_vector(self) -> np.ndarray:
        """The (3, ) translation column."""
        return self.to_array()[:, 3]

    def to_string(self, prefix: bool = False) -> str:
        """
        Serialise the matrix as space-separated values, which
        parse_matrix_string() reads back exactly.

        Args:
            prefix (bool, optional): whether to start the string with
                the "9:" marker. Defaults to False.

        Returns:
            str: the serialised matrix.
        """
        text = " ".join(repr(float(v)) for v in self)
        if prefix:
            return "9: " + text
        return text


def _to_finite_float(token: str) -> float | None:
    if not _NUMBER_PATTERN.fullmatch(token):
        return None
    value = float(token)
    if not math.isfinite(value):
        return None
    return value


def parse_matrix_string(text: str) -> RotationTranslationMatrix | None:
    """
    Parse a free-form string of 12 numbers into a
    RotationTranslationMatrix.

    Surrounding whitespace and an optional leading "9:" marker are
    ignored. Tokens are separated by any run of whitespace and/or
    commas.

    Args:
        text (str): the matrix string, e.g.
            "9: 1 0 0 0 0 1 0 0 0 0 1 0".

    Returns:
        RotationTranslationMatrix | None: the parsed matrix, or None if
        the string does not hold exactly 12 finite numbers.
    """
    cleaned = _PREFIX_PATTERN.sub("", text.strip(), count=1)
    tokens = _SEPARATOR_PATTERN.split(cleaned)

    if len(tokens) != len(MATRIX_FIELDS):
        return None

    values = [_to_finite_float(token) for token in tokens]
    if any(v is None for v in values):
        return None

    return RotationTranslationMatrix(*values)


def rotation_residual(matrix: RotationTranslationMatrix) -> float:
    """
    Compute the largest absolute deviation of R @ R.T from the
    identity, R being the rotation block of the matrix.
    """
    rotation = matrix.rotation
    return float(np.max(np.abs(rotation @ rotation.T - np.identity(3))))


def is_rotation_matrix(
        matrix: RotationTranslationMatrix,
        atol: float = 1e-6
) -> bool:
    """
    Check whether the rotation block is a proper rotation, i.e.
    orthonormal with a determinant of +1, within atol.

    This is advisory only, decompose_matrix() does not rely on it.

    Args:
        matrix (RotationTranslationMatrix): the matrix to check.
        atol (float, optional): absolute tolerance. Defaults to 1e-6.

    Returns:
        bool: True if the block is a proper rotation.
    """
    if rotation_residual(matrix) > atol:
        return False
    return bool(np.isclose(np.linalg.det(matrix.rotation), 1, atol=atol))

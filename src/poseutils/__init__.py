"""
poseutils - A Python package to decompose 3x4 rigid-body transformation
matrices into Tait-Bryan (ZYX) Euler angles and translations.
"""

__version__ = "0.1.0"
__license__ = "MIT"


import importlib

from .matrix import (
    RotationTranslationMatrix,
    parse_matrix_string,
    is_rotation_matrix,
)
from .decomposition import (
    DecompositionResult,
    EulerAngles,
    Translation,
    decompose_matrix,
)
from .formatting import format_precision, format_result

__submodules__ = {
    "matrix",
    "decomposition",
    "formatting",
    "parameters",
    "insight",
}

__function_submodules__ = {
    "analyse_spatial_context": "insight",
    "build_analysis_prompt": "insight",
    "load_parameters": "parameters",
}

__all__ = [
    "RotationTranslationMatrix", "parse_matrix_string", "is_rotation_matrix",
    "DecompositionResult", "EulerAngles", "Translation", "decompose_matrix",
    "format_precision", "format_result",
]
__all__ += list(__submodules__) + list(__function_submodules__)


def __getattr__(name):
    # Lazy load submodules, keeps httpx and yaml out of the core import
    if name in __submodules__:
        return importlib.import_module(f"{__name__}.{name}")

    if name in __function_submodules__:
        submodule = importlib.import_module(
            f"{__name__}.{__function_submodules__[name]}"
        )
        return getattr(submodule, name)

    raise AttributeError(f"module {__name__} has no attribute {name}.")

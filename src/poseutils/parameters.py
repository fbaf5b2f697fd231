from collections.abc import Mapping  # more flexible than dict
import warnings

import yaml

from .formatting import PRECISION_CHOICES

DEFAULT_PARAMS = {
    "precision": 10,
    "show_radians": False,
    "insight": {
        "model": "gemini-3-flash-preview",
        "endpoint": "https://generativelanguage.googleapis.com/v1beta",
        "api_key_env": "API_KEY",
        "timeout": 30.0,
    },
}


def validate_and_fill_params(
        user_params: dict,
        defaults: dict = DEFAULT_PARAMS
) -> dict:
    """
    Fill the missing entries of user parameters with their defaults,
    recursing into nested sections. Unknown keys are dropped with a
    UserWarning.

    Args:
        user_params (dict): dict of user-provided parameters.
        defaults (dict, optional): default parameters (can be nested).
            Defaults to DEFAULT_PARAMS.

    Returns:
        dict: new dictionary with defaults filled in
    """
    for key in user_params:
        if key not in defaults:
            warnings.warn(
                f"Parameter '{key}' is unknown and will not be used.",
                UserWarning
            )

    filled_params = {}
    for key, default in defaults.items():
        user_value = user_params.get(key)
        if isinstance(default, Mapping):
            filled_params[key] = validate_and_fill_params(
                user_value or {}, default
            )
        elif user_value is None:
            filled_params[key] = default
        else:
            filled_params[key] = user_value

    return filled_params


def check_params(params: dict) -> None:
    """
    Check the values of a filled parameter dictionary.

    Raises:
        ValueError: if a value is out of its allowed range.
    """
    if params["precision"] not in PRECISION_CHOICES:
        raise ValueError(
            f"precision must be one of {PRECISION_CHOICES}, "
            f"got {params['precision']}."
        )
    insight = params["insight"]
    if not insight["model"]:
        raise ValueError("insight model name must not be empty.")
    if insight["timeout"] <= 0:
        raise ValueError(
            f"insight timeout must be positive, got {insight['timeout']}."
        )


def load_parameters(path: str) -> dict:
    """
    Load, fill and check the parameters of a YAML file.

    Args:
        path (str): the path to the YAML parameter file.

    Returns:
        dict: the complete parameter dictionary.
    """
    with open(path, "r", encoding="utf8") as file:
        user_params = yaml.safe_load(file)

    # an empty file loads as None
    if user_params is None:
        user_params = {}

    params = validate_and_fill_params(user_params)
    check_params(params)
    return params

#!/usr/bin/env python3

"""
Decompose a 3x4 transformation matrix string into ZYX Euler angles and
a translation vector, and print the result.
"""

import argparse
import logging
import sys

from poseutils.decomposition import decompose_matrix
from poseutils.formatting import PRECISION_CHOICES, format_result
from poseutils.insight import analyse_spatial_context
from poseutils.matrix import is_rotation_matrix, parse_matrix_string
from poseutils.parameters import (
    DEFAULT_PARAMS,
    check_params,
    load_parameters,
    validate_and_fill_params,
)

INVALID_INPUT_MESSAGE = (
    "Invalid matrix format. Expected 12 space-separated numbers."
)


def init_logger(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger("poseutils")

    # Check if the logger already has handlers to avoid adding
    # multiple.
    if not logger.hasHandlers():
        logger.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            logging.Formatter(fmt="[%(levelname)s] %(message)s")
        )
        logger.addHandler(console_handler)

    for handler in logger.handlers:
        handler.setLevel(logging.DEBUG if verbose else logging.INFO)

    return logger


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="decompose_matrix",
        description=(
            "Decompose a 3x4 rotation-translation matrix into Tait-Bryan "
            "(ZYX) Euler angles and a translation vector."
        ),
    )
    parser.add_argument(
        "matrix",
        nargs="?",
        type=str,
        help=(
            "The 12 matrix values in row-major order, optionally prefixed "
            "by '9:'. Read from stdin if omitted."
        ),
    )
    parser.add_argument(
        "-p",
        "--precision",
        type=int,
        choices=PRECISION_CHOICES,
        default=None,
        help="The number of decimal places to display.",
    )
    parser.add_argument(
        "--radians",
        default=False,
        action="store_true",
        help="Also display the Euler angles in radians.",
    )
    parser.add_argument(
        "--params",
        type=str,
        default=None,
        help="Path to a YAML parameter file.",
    )
    parser.add_argument(
        "--insight",
        default=False,
        action="store_true",
        help="Request an expert analysis from the text-generation service.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        default=False,
        action="store_true",
        help="Print debug messages.",
    )
    return parser


def main(argv: list[str] = None) -> int:
    args = get_parser().parse_args(argv)
    logger = init_logger(args.verbose)

    if args.params:
        params = load_parameters(args.params)
    else:
        params = validate_and_fill_params({}, DEFAULT_PARAMS)

    # command line options override the parameter file
    if args.precision is not None:
        params["precision"] = args.precision
    if args.radians:
        params["show_radians"] = True
    check_params(params)

    text = args.matrix
    if text is None:
        text = sys.stdin.read()

    matrix = parse_matrix_string(text)
    if matrix is None:
        print(INVALID_INPUT_MESSAGE, file=sys.stderr)
        return 1
    logger.debug(f"Parsed matrix: {matrix.to_string()}")

    if not is_rotation_matrix(matrix):
        logger.warning(
            "The 3x3 block is not a proper rotation matrix, the Euler "
            "angles may be meaningless."
        )

    result = decompose_matrix(matrix)
    print(
        format_result(
            result,
            decimals=params["precision"],
            show_radians=params["show_radians"],
        )
    )

    if args.insight:
        print("\nSpatial Context Analysis")
        print(analyse_spatial_context(result, params))

    return 0


if __name__ == "__main__":
    sys.exit(main())

from .decomposition import DecompositionResult

PRECISION_CHOICES = (6, 8, 10, 12, 14)
DEFAULT_PRECISION = 10


def format_precision(value: float, decimals: int = DEFAULT_PRECISION) -> str:
    """
    Render a scalar in fixed-point notation with the given number of
    decimal places, e.g. format_precision(-0.02211853, 10) gives
    "-0.0221185300". This is cosmetic only.

    Args:
        value (float): the value to render.
        decimals (int, optional): the number of decimal places.
            Defaults to DEFAULT_PRECISION.

    Raises:
        ValueError: if decimals is negative.

    Returns:
        str: the formatted value.
    """
    if decimals < 0:
        raise ValueError(
            f"decimals must be a non-negative integer, got {decimals}."
        )
    # adding 0.0 turns -0.0 into 0.0
    return f"{float(value) + 0.0:.{int(decimals)}f}"


def format_result(
        result: DecompositionResult,
        decimals: int = DEFAULT_PRECISION,
        show_radians: bool = False
) -> str:
    """
    Build a plain-text report of a decomposition: Euler angles, the
    translation vector and the rotation block.

    Args:
        result (DecompositionResult): the decomposition to report.
        decimals (int, optional): decimal places for every value.
            Defaults to DEFAULT_PRECISION.
        show_radians (bool, optional): whether to also list the angles
            in radians. Defaults to False.

    Returns:
        str: the report, one item per line.
    """
    def fmt(value: float) -> str:
        return format_precision(value, decimals)

    labels = ("Roll (X)", "Pitch (Y)", "Yaw (Z)")
    lines = ["Rotation (Euler Angles)"]
    for label, deg, rad in zip(
            labels, result.euler_degrees, result.euler_radians
    ):
        line = f"  {label:<10} {fmt(deg)}°"
        if show_radians:
            line += f"  ({fmt(rad)} rad)"
        lines.append(line)

    lines.append("Translation Vector")
    for axis, value in zip("XYZ", result.translation):
        lines.append(f"  {axis} Axis     {fmt(value)}")

    lines.append("Rotation Matrix [3x3]")
    for row in result.matrix.rotation:
        lines.append("  " + "  ".join(fmt(v) for v in row))

    return "\n".join(lines)

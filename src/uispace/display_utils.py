"""Display utilities for rendering coordinates as labels."""


def format_point(x: float, y: float) -> str:
    """Render a point with two decimals.

    Examples::

        format_point(5, 5)        # -> "(5.00, 5.00)"
        format_point(-2.5, 1/3)   # -> "(-2.50, 0.33)"
    """
    return f"({x:.2f}, {y:.2f})"


def format_rect(x: float, y: float, width: float, height: float) -> str:
    """Render a rectangle as ``(x:.., y:.., width:.., height:..)``."""
    return f"(x:{x:.2f}, y:{y:.2f}, width:{width:.2f}, height:{height:.2f})"

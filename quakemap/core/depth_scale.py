"""Depth color scale - Pure functions and constant tables.

Six viridis colors keyed to six depth buckets. The buckets are half-open
(lower, upper] and are tested in order; anything that matches none of them
(depth <= -10, depth > 90, or NaN) takes the last color.
"""

# Viridis palette, shallow to deep
VIRIDIS: tuple[str, ...] = (
    "#440154",
    "#3E4A89",
    "#31688E",
    "#35B779",
    "#A6D96A",
    "#FDE725",
)

# (lower, upper] bounds in km for the first five colors
DEPTH_BUCKETS: tuple[tuple[float, float], ...] = (
    (-10, 10),
    (10, 30),
    (30, 50),
    (50, 70),
    (70, 90),
)

# Legend labels, one per color
DEPTH_LABELS: tuple[str, ...] = (
    "-10 to 10",
    "10 to 30",
    "30 to 50",
    "50 to 70",
    "70 to 90",
    "90+",
)


def get_depth_index(depth: float) -> int:
    """Get the bucket index (0-5) for a depth in kilometers.

    Pure function. First matching bucket wins; the catch-all is index 5.
    """
    for index, (lower, upper) in enumerate(DEPTH_BUCKETS):
        if lower < depth <= upper:
            return index
    return len(VIRIDIS) - 1


def get_depth_color(depth: float) -> str:
    """Get the hex color for a depth in kilometers.

    Pure function.

    Args:
        depth: Earthquake depth in km

    Returns:
        Hex color string (e.g., "#440154")
    """
    return VIRIDIS[get_depth_index(depth)]

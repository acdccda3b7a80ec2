"""Depth legend content - Pure functions.

Builds the legend rows and HTML from the fixed depth scale tables.
The legend never depends on the fetched data.
"""

from dataclasses import dataclass

from quakemap.core.depth_scale import DEPTH_LABELS, VIRIDIS


DEFAULT_LEGEND_TITLE = "Depth (km)"

SWATCH_STYLE = (
    "background: {color};"
    " width: 20px;"
    " height: 20px;"
    " display: inline-block;"
    " margin-right: 8px;"
    " margin-top: -5px;"
    " border: 0px solid #000;"
)


@dataclass(frozen=True)
class LegendRow:
    """One legend entry: a color swatch and its depth range label."""
    color: str
    label: str


def get_legend_rows() -> list[LegendRow]:
    """Pair each depth color with its label, shallow to deep."""
    return [
        LegendRow(color=color, label=label)
        for color, label in zip(VIRIDIS, DEPTH_LABELS)
    ]


def format_legend_html(title: str = DEFAULT_LEGEND_TITLE) -> str:
    """Format the legend panel body as HTML.

    Pure function.

    Args:
        title: Heading shown above the rows

    Returns:
        HTML with a heading followed by one row per depth bucket
    """
    parts = [f"<h4>{title}</h4>"]
    for row in get_legend_rows():
        style = SWATCH_STYLE.format(color=row.color)
        parts.append(f'<div><i style="{style}"></i><span>{row.label}</span></div>')
    return "".join(parts)

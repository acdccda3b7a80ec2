"""Map Renderer - Imperative Shell.

This module composes the interactive Leaflet map with folium: a single
base tile layer, a toggleable earthquake layer and a static depth legend.
Marker content and legend rows come from the core module.
"""

import logging
from pathlib import Path
from typing import Iterable

import folium
from branca.element import MacroElement
from jinja2 import Template

from quakemap.core.config import MapConfig
from quakemap.core.legend import format_legend_html
from quakemap.core.markers import (
    FILL_OPACITY,
    OUTLINE_COLOR,
    OUTLINE_OPACITY,
    OUTLINE_WEIGHT,
    Marker,
)


logger = logging.getLogger(__name__)


class DepthLegend(MacroElement):
    """Static Leaflet control showing the depth color scale.

    Rendered as an L.control anchored to a map corner; its content is
    fixed at construction and never updates.
    """

    _template = Template(
        """
        {% macro script(this, kwargs) %}
            var {{ this.get_name() }} = L.control({position: {{ this.position|tojson }}});
            {{ this.get_name() }}.onAdd = function (map) {
                var div = L.DomUtil.create("div", "info legend");
                div.innerHTML = {{ this.html|tojson }};
                return div;
            };
            {{ this.get_name() }}.addTo({{ this._parent.get_name() }});
        {% endmacro %}
        """
    )

    def __init__(self, title: str, position: str = "bottomright") -> None:
        super().__init__()
        self._name = "DepthLegend"
        self.title = title
        self.position = position
        self.html = format_legend_html(title)


def build_circle_marker(marker: Marker) -> folium.CircleMarker:
    """Turn a Marker descriptor into a folium circle marker with popup."""
    return folium.CircleMarker(
        location=marker.location,
        radius=marker.radius,
        color=OUTLINE_COLOR,
        weight=OUTLINE_WEIGHT,
        opacity=OUTLINE_OPACITY,
        fill=True,
        fill_color=marker.fill_color,
        fill_opacity=FILL_OPACITY,
        popup=folium.Popup(marker.popup_html),
    )


def build_marker_layer(
    markers: Iterable[Marker],
    name: str = "Earthquakes",
) -> folium.FeatureGroup:
    """Group circle markers into one toggleable overlay layer.

    Args:
        markers: Marker descriptors from the core module
        name: Layer name shown in the layer control

    Returns:
        FeatureGroup holding one circle marker per Marker
    """
    layer = folium.FeatureGroup(name=name, overlay=True, control=True, show=True)
    for marker in markers:
        build_circle_marker(marker).add_to(layer)
    return layer


def create_map(marker_layer: folium.FeatureGroup, config: MapConfig) -> folium.Map:
    """Compose the map view around an earthquake layer.

    The base tile layer is kept out of the layer control, so only the
    earthquake layer can be toggled. The control is always expanded.

    Args:
        marker_layer: Earthquake layer from build_marker_layer()
        config: Map configuration

    Returns:
        folium.Map with base layer, earthquake layer, layer control and legend
    """
    fmap = folium.Map(
        location=list(config.center),
        zoom_start=config.zoom,
        tiles=None,
    )

    folium.TileLayer(
        tiles=config.tile_url,
        attr=config.tile_attribution,
        name="Street Map",
        overlay=False,
        control=False,
    ).add_to(fmap)

    marker_layer.add_to(fmap)

    folium.LayerControl(collapsed=False).add_to(fmap)

    DepthLegend(config.legend_title, config.legend_position).add_to(fmap)

    return fmap


def render_html(fmap: folium.Map) -> str:
    """Render the map as a standalone HTML page."""
    return fmap.get_root().render()


def save_map(fmap: folium.Map, path: str | Path) -> Path:
    """Write the map page to disk.

    This function performs file I/O.

    Returns:
        Path the page was written to
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fmap.save(str(path))

    logger.info("Wrote earthquake map to %s", path)

    return path

"""Earthquake depth map: USGS events on an interactive folium map."""

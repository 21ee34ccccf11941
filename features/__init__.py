"""
Feature layer: GeoJSON Feature and FeatureCollection wrappers.
"""

from features.feature import Feature, FeatureCollection

__all__ = [
    "Feature",
    "FeatureCollection",
]

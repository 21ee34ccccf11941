"""
Interchange Module: WKT and GeoJSON codecs.

`from_wkt` and `from_geojson` are the entry points for untrusted text and
documents; both raise the parsing-related error kinds of `common.errors`.
"""

from interchange import geojson, wkt

from_wkt = wkt.loads
from_geojson = geojson.loads
to_wkt = wkt.dumps
to_geojson = geojson.to_geojson

__all__ = [
    "wkt",
    "geojson",
    "from_wkt",
    "from_geojson",
    "to_wkt",
    "to_geojson",
]

"""
KML Viewer - upload a KML file and inspect its placemark geometries.

This package parses KML placemarks into typed geometry records, computes
great-circle lengths for line geometries, and serves a summary table and
an interactive map over a small HTTP API.
"""

__version__ = "0.1.0"

"""Shortest multi-stop route planning over a road network."""

__version__ = "0.1.0"

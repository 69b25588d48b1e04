"""Destinations API: serves the travel destinations catalog."""

__version__ = "0.1.0"

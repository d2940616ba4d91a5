"""Eventhub: HTTP API over the events and nudges document collections."""

__version__ = "0.1.0"
__author__ = "Eventhub Team"

__all__ = ["__version__", "__author__"]

"""VVO Bridge - JSON translation proxy for the Dresden VVO transit API."""

__version__ = "1.0.0"

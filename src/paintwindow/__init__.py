# src/paintwindow/__init__.py
"""Paint / stain weather window service."""

__version__ = "1.0.0"

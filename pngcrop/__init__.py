"""Crop images to the minimal bounding box of their content."""

__version__ = "1.0.0"

"""Labelled text areas, colours, rectangles and an output checker."""

__version__ = "0.1.0"
__all__ = ["geometry", "colour", "textarea", "checker"]
"""Prefix search bar, triangle collision detection with a pygame viewer, and repeated binary operations."""

__version__ = "0.1.0"
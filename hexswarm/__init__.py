"""Geometry, aggregation sensing, starting layouts and enclosing bounds for particle systems on the triangular lattice."""

__version__ = "0.1.0"
__all__ = ["bounds", "geometry", "layout", "sight"]
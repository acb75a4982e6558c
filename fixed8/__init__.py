"""Fixed-point numbers with 8 fractional bits, points, a point-in-triangle test and demos."""

__version__ = "0.1.0"
__all__ = ["bsp", "demo", "fixed", "point"]
"""Fourier epicycle reconstruction of closed polygons."""

__version__ = "0.1.0"

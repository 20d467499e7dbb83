"""Fourier series visualised as epicycles and harmonic decompositions."""

__version__ = "0.1.0"

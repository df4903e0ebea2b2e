"""Sampled signal frames, plain-text storage, a radix-2 FFT and a pipeline joining them."""

__version__ = "0.1.0"
__all__ = ["__version__"]
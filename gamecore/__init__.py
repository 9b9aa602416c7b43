"""Vectors, matrices, quaternions, transforms, convolution filters, UDP networking and force generators for games."""

__version__ = "0.1.0"
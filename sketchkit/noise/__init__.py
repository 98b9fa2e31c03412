"""Perlin and simplex noise with a sine/cosine lookup table."""

__all__ = ["lut", "perlin", "simplex"]
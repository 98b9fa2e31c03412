"""Noise, fading, corner warping, optical-flow point and 2D physics helpers for sketches."""

__version__ = "0.1.0"
__all__ = ["fade", "flow", "noise", "physics", "warper"]
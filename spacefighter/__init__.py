"""Game logic for a top-down space shooter: vectors, flags, particles, ships and levels."""

__version__ = "0.1.0"
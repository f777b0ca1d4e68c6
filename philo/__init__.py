"""Dining philosophers simulation with one thread per philosopher."""

__version__ = "1.0.0"
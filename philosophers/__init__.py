"""Dining philosophers simulation with one thread per philosopher."""

__version__ = "0.1.0"
__all__ = ["basics", "settings", "simulation", "cli"]
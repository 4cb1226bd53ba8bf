"""Dining philosophers simulation with threads, forks and a starvation monitor."""

__version__ = "1.0.0"
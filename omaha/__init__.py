"""Versions, wall and monotonic time, and time sources for an Omaha update client."""

__version__ = "0.1.0"
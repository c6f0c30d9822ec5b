"""Read-only REST service over books, trades and positions."""

__version__ = "0.1.0"

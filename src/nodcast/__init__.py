"""Nodcast - static podcast site renderer."""

__version__ = "0.1.0"

"""Design Quest AI portfolio site."""

__version__ = "0.1.0"

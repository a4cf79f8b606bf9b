"""JSON HTTP API, built on Flask, for a library of books stored in MongoDB."""

__version__ = "0.1.0"
__all__ = ["__version__"]
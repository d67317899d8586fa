"""Validation of .ber tile maps, with a command-line checker and small helpers."""

__version__ = "0.1.0"
__all__ = ["__version__"]
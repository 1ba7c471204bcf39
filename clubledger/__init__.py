"""Replay a computer club's working day and tally table revenue."""

__version__ = "0.1.0"
__all__ = ["__version__"]
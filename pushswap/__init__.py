"""Two-stack integer sorting with a limited operation set, and a move checker."""

__version__ = "0.1.0"
__all__ = ["__version__"]
"""HTTP service for operations on square integer CSV matrices."""

__version__ = "0.1.0"
__all__ = ["__version__"]
"""Dense real matrices: a functional interface over RawMatrix and a Matrix class."""

__version__ = "0.1.0"
__all__ = ["functional", "matrix"]
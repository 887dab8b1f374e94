"""Solutions to classic counting, sequence and search practice problems."""

__version__ = "0.1.0"
__all__ = ["__version__"]
"""Square integer matrices with arithmetic, diagonal sums, row and column swaps, and a console tool."""

__version__ = "0.1.0"
__all__ = ["__version__"]
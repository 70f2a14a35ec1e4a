"""Small algorithms, data structures, text tools and command-line exercises."""

__version__ = "0.1.0"
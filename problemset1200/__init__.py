"""Solutions to thirty algorithmic problems, one module each, with a command line entry."""

__version__ = "0.1.0"
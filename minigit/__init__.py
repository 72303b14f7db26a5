"""A minimal content-addressed version control tool with staging, commits and history."""

__version__ = "0.1.0"
__all__ = ["__version__"]
"""Utility accounts dashboard with a mock payment endpoint."""

__version__ = "0.1.0"

__all__ = ["__version__"]

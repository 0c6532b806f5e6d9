"""GitHub → Discord event relay."""

__version__ = "0.1.0"

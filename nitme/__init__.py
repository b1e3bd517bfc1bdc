"""Catch nits in Go source before a reviewer does."""

__version__ = "0.1.0"

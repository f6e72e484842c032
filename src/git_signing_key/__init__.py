"""Interactively choose the GPG key git signs commits with."""

__version__ = "0.1.0"

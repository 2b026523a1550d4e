"""Command line client for the Hover API."""

__version__ = "0.1.0"

"""Command line client for the norikra stream processing server."""

__version__ = "0.1.0"

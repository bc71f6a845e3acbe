"""Terminal client for the public Google Translate endpoint."""

__version__ = "0.1.0"

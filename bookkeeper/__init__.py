"""Double-entry bookkeeping web application."""

__version__ = "0.1.0"

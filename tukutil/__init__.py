"""Helper functions for XDS/XDW interoperability services."""

__version__ = "0.1.0"

"""Convert AI coding agent configuration between agent formats."""

__version__ = "0.1.0"

"""CuniGestion: record keeping for rabbit farms."""

__version__ = "0.1.0"

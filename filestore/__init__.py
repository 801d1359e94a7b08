"""HTTP service and library for managing directories and files inside a local storage root."""

__version__ = "1.0.0"
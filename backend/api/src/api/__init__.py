"""REST API for the resort booking backend."""

__version__ = "0.1.0"

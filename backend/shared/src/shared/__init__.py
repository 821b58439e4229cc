"""Shared models, services and utilities for the resort booking backend."""

__version__ = "0.1.0"

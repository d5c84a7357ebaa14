"""Scrimmage - round-based pass play and drive resolution engine."""

__version__ = "0.1.0"

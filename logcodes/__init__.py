"""Utilities for managing and auditing a catalog of structured log codes."""

__version__ = "0.1.0"

"""
Command-line interface components.

This package contains the CLI entry point for DNS Zone Sync.
"""

from .main import main

__all__ = ["main"]

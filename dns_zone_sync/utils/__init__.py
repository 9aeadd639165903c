"""
Utility functions and helpers.

This package contains validation helpers for declared records.
"""

from .validators import (
    validate_content,
    validate_hostname,
    validate_ipv4,
    validate_record_name,
    validate_record_type,
    validate_zone_name,
)

__all__ = [
    "validate_content",
    "validate_hostname",
    "validate_ipv4",
    "validate_record_name",
    "validate_record_type",
    "validate_zone_name",
]

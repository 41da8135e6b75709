# src/fixer/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from fixer.shared.validators import (
    validate_access_key,
    validate_base_url,
    validate_currency_code,
)
from fixer.shared.logging_conf import setup_logging

__all__ = [
    "validate_currency_code",
    "validate_access_key",
    "validate_base_url",
    "setup_logging",
]

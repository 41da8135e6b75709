# src/fixer/shared/validators.py
"""
Input Validation Utilities - Configuration and Input Validation

This module provides validation functions for configuration values and
command-line input: currency codes, API access keys and base URLs.

Files that USE this module:
- fixer.config.settings (uses validation functions in Settings field validators)
- fixer.adapters.providers.options (base_url option checks parsed URLs)
- fixer.app (validates --from/--to currency codes)

Files that this module USES:
- None (pure utility functions)
"""
import re
import urllib.parse


def validate_currency_code(code: str) -> bool:
    """
    Validate ISO 4217 currency code format.

    Args:
        code: Currency code to validate (e.g. "EUR")

    Returns:
        True if valid, False otherwise
    """
    if not code:
        return False

    # Three upper-case ASCII letters: EUR, USD, SEK
    return bool(re.match(r'^[A-Z]{3}$', code))


def validate_access_key(access_key: str) -> bool:
    """
    Validate API access key format.

    The key is an opaque credential, so only whitespace is rejected. An empty
    key is valid: the client then sends no access_key parameter.

    Args:
        access_key: Access key to validate

    Returns:
        True if valid, False otherwise
    """
    if not access_key:
        return True

    return not any(ch.isspace() for ch in access_key)


def validate_base_url(url: str) -> bool:
    """
    Validate that a base URL has an http(s) scheme and a host.

    Args:
        url: URL to validate

    Returns:
        True if valid, False otherwise
    """
    if not url:
        return False

    try:
        parsed = urllib.parse.urlsplit(url)
        # Accessing port validates it (raises ValueError when out of range)
        parsed.port
    except ValueError:
        return False

    return parsed.scheme in ("http", "https") and bool(parsed.hostname)

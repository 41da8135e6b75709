# src/fixer/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (rates API client)
- Formatting (output)
"""

__all__ = []

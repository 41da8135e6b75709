# src/fixer/adapters/formatting/__init__.py
"""
Formatting Adapters - Output Formatting

This package contains plain-text formatting for conversion results.
"""

from fixer.adapters.formatting.formatter import conversion_line, rates_table

__all__ = ["conversion_line", "rates_table"]

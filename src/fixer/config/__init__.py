# src/fixer/config/__init__.py
"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
Supports environment variables and an optional .env file. Settings are
loaded on first use through get_settings(), never at import.
"""

from fixer.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]

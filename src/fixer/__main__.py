# src/fixer/__main__.py
"""Module entry point: python -m fixer"""
import sys

from fixer.app import main

sys.exit(main())

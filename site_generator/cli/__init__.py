"""
CLI module for Quarto Site Generator.

This module provides the command-line interface, including the main entry
point installed as the ``qsite`` console script.
"""

from .commands import main

__all__ = ["main"]

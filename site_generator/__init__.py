"""
Quarto Site Generator

Scaffolds Quarto research project websites: directory layout, bundled
branding assets, site configuration and starter documents.
"""

__version__ = "0.1.0"

from site_generator.core import ScaffoldSpec, materialize
from site_generator.scaffolding import create_site_structure

__all__ = [
    "ScaffoldSpec",
    "create_site_structure",
    "materialize",
]

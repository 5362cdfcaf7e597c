"""Site scaffolding package for Quarto research project websites.

Public API:
    create_site_structure: Validate, confirm and create a new site scaffold
    build_site_spec: Build the ScaffoldSpec for a site type without writing

Example:
    from site_generator.scaffolding import create_site_structure

    create_site_structure("cfa", "my-site", confirm=lambda _prompt: True)
"""

from .create import create_site_structure
from .documents import BASE_DOCUMENTS, EXTENDED_DOCUMENTS, DocumentTemplate, get_documents
from .site_types import (
    SITE_TYPE_DESCRIPTIONS,
    SUPPORTED_SITE_TYPES,
    build_site_spec,
    validate_site_type,
)
from .templates import (
    get_gitignore_template,
    get_quarto_yml_template,
    get_r_script_template,
    get_styles_css_template,
)

__all__ = [
    # Main public API
    "create_site_structure",
    "build_site_spec",
    "validate_site_type",
    "SUPPORTED_SITE_TYPES",
    "SITE_TYPE_DESCRIPTIONS",
    # Documents
    "BASE_DOCUMENTS",
    "EXTENDED_DOCUMENTS",
    "DocumentTemplate",
    "get_documents",
    # Template functions
    "get_gitignore_template",
    "get_quarto_yml_template",
    "get_r_script_template",
    "get_styles_css_template",
]

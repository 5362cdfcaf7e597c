"""Type definitions for scaffolding module.

Aliases for the plain collections the site catalog builds before they are
frozen into a ``ScaffoldSpec``.
"""

from typing import Dict, List

DirectoryList = List[str]
"""List of directory paths relative to the site root."""

StaticFileMap = Dict[str, str]
"""Relative file path -> fixed text content."""

AssetMap = Dict[str, str]
"""Relative destination path -> bundled asset identifier
(e.g. 'img/favicon.png' -> 'img/favicon.png')."""

# Templated documents are described by DocumentTemplate in documents.py

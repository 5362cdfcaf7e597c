"""Template generation functions for site scaffolding."""

import json
from collections.abc import Sequence

from site_generator.helpers.site_config import DEFAULT_GITHUB_URL, DEFAULT_TITLE

from .documents import DocumentTemplate

BRAND_FONT_FILE = "Lato-Regular.ttf"


def _yaml_string(value: str) -> str:
    """Quote a value as a YAML double-quoted scalar."""
    return json.dumps(value, ensure_ascii=False)


def get_styles_css_template(extended: bool = False) -> str:
    """Generate styles.css with the site font and navbar/dropdown styling.

    Args:
        extended: Also register the bundled brand font from ``fonts/``.

    Returns:
        Complete styles.css content as string
    """
    font_face = ""
    if extended:
        font_face = f"""
/* Bundled brand font (fonts/{BRAND_FONT_FILE}) */
@font-face {{
  font-family: "Lato";
  src: url("fonts/{BRAND_FONT_FILE}") format("truetype");
  font-weight: 400;
  font-style: normal;
}}

/* Headings use the bundled font */
h1, h2, h3, h4 {{
  font-family: "Lato", "Source Sans 3", sans-serif;
}}
"""

    return f"""/* styles.css */

/* Import Source Sans 3 from Google Fonts */
@import url('https://fonts.googleapis.com/css2?family=Source+Sans+3:wght@400;600;700&display=swap');
{font_face}
/* Apply font site-wide */
body {{
  font-family: "Source Sans 3", sans-serif;
  margin: 0;
  padding: 0;
}}

/* Style for navigation menu */
.navbar,
.navbar-dark {{
  background-color: #2b1a78 !important;
}}

/* Adjust text color in navbar */
.navbar .navbar-brand,
.navbar .nav-link,
.navbar .navbar-nav .nav-link {{
  color: white !important;
}}

/* Bold active menu item */
.navbar .nav-item.active .nav-link,
.navbar .nav-link.active {{
  font-weight: 600;
}}

/* Improve spacing and hover states */
.navbar .nav-link:hover {{
  text-decoration: underline;
}}

/* Uniform dropdown style */
.dropdown-menu {{
  background-color: white;
  border: 1px solid #ccc;
  border-radius: 0px;
  padding: 0;
  box-shadow: none !important;
  margin-top: 8px;
  min-width: 200px;
}}

/* Dropdown items */
.dropdown-item {{
  padding: 10px 16px;
  font-weight: 400;
  color: #2b1a78;
  border-radius: 0;
  transition: background-color 0.2s ease;
}}

/* Hover effect */
.dropdown-item:hover {{
  background-color: #f1f1f1;
  color: #2b1a78;
}}

/* Ensure consistent border radius on first/last items */
.dropdown-item:first-child {{
  border-top-left-radius: 0px;
  border-top-right-radius: 0px;
}}
.dropdown-item:last-child {{
  border-bottom-left-radius: 0px;
  border-bottom-right-radius: 0px;
}}
"""


def get_gitignore_template() -> str:
    """Generate .gitignore keeping data, logs and local R state out of git."""
    return """# Ignore data files
*.csv
*.xlsx
*.xls
*.json
*.xml
*.rdata
*.RData
*.rds
*.rda
*.RDS
*.db
*.sql
*.sqlite
# Log and temporary files
*.log
*.out
*~
*.bak
*.swp
# Environment files
.Renv*
.Rhistory
.Rproj.user
.RData
.Ruserdata
# Directory exclusions
data/
cache/
tmp/
# Configuration files
*.conf
.env
"""


def get_quarto_yml_template(
    documents: Sequence[DocumentTemplate],
    site_title: str = DEFAULT_TITLE,
    github_url: str = DEFAULT_GITHUB_URL,
) -> str:
    """Generate _quarto.yml with one navbar entry per generated document.

    Args:
        documents: Generated pages, in navbar order
        site_title: Website title shown in the navbar
        github_url: Target of the trailing "Github" navbar link

    Returns:
        Complete _quarto.yml content as string
    """
    nav_entries = "".join(
        f"      - text: {_yaml_string(doc.title)}\n"
        f"        href: {doc.href}\n"
        for doc in documents
    )

    return f"""project:
  type: website

website:
  title: {_yaml_string(site_title)}
  favicon: img/favicon.png
  navbar:
    right:
{nav_entries}      - text: "Github"
        href: {_yaml_string(github_url)}

format:
  html:
    theme: flatly
    css: styles.css
    toc: true
    toc-location: left

execute:
  freeze: auto
"""


def get_r_script_template() -> str:
    """Generate the comment header used for starter R scripts."""
    return """####################
# Author:
# Date Last Updated:
# File Name:
# File Description:
####################

"""

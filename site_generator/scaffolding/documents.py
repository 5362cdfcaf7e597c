"""Quarto documents generated for a research project site.

Each entry maps a logical document name (the ``.qmd`` stem) to its page
title and the body lines written below the YAML header. Order matters: it
is the order the documents are created in and the order of the navbar.
"""

from __future__ import annotations

from typing import NamedTuple


class DocumentTemplate(NamedTuple):
    """Title and starter body for one generated page."""

    name: str
    title: str
    body: tuple[str, ...]

    @property
    def filename(self) -> str:
        return f"{self.name}.qmd"

    @property
    def href(self) -> str:
        return f"{self.name}.html"


_INDEX_BODY = (
    "## Introduction",
    "Welcome to the ___ project website. This is a private, password-protected "
    "website that should not be shared externally.",
    "This section provides a comprehensive introduction to the project, "
    "detailing the scope and goals of ___.",
    "",
    "## Objectives",
    "Details of the project's primary goals and expected outcomes. This may "
    "include reducing recidivism, optimizing justice system resources, and "
    "enhancing public safety.",
    "",
    "## Key Questions",
    "What are the major challenges the project aims to address?",
    "",
    "## Project Links",
    "Access to project resources and repositories is critical for team "
    "collaboration and transparency. Below are the links to key project tools "
    "and platforms:",
    "",
    "- **SharePoint**: [Link to the project's files](#)",
    "- **GitHub Repository**: [Link to the project's GitHub repository](#)",
    "- **Asana**: [Link to the project's Asana page](#)",
    "",
    "## Stakeholders",
    "This project involves collaboration between multiple stakeholders, "
    "including government agencies, community organizations, and justice system "
    "partners. This section lists key stakeholders and describes their roles "
    "and contributions to the project.",
    "",
    "",
)

BASE_DOCUMENTS: tuple[DocumentTemplate, ...] = (
    DocumentTemplate("index", "Project Overview", _INDEX_BODY),
    DocumentTemplate(
        "executive_summary", "Executive Summary", ("## Executive Summary",),
    ),
    DocumentTemplate("analysis", "Analysis", ("## Analysis",)),
    DocumentTemplate("analysis_plan", "Analysis Plan", ("## Analysis Plan",)),
    DocumentTemplate(
        "data_codebooks",
        "Codebooks",
        (
            "## About This Page",
            "Detailed descriptions of all datasets, variables, and "
            "classifications used in the project.",
            "",
            "## File 1 Codebook",
            "",
            "## File 2 Codebook",
        ),
    ),
    DocumentTemplate(
        "contact",
        "Contact",
        (
            "## About This Page",
            "Information for contacting project team members.",
            "",
            "## Team",
            "Names and roles of the project team members.",
            "",
            "## Reach Out",
            "Contact details for further communication.",
        ),
    ),
)

# Extra pages for the extended layout, placed before "contact" in the navbar.
EXTENDED_DOCUMENTS: tuple[DocumentTemplate, ...] = (
    DocumentTemplate(
        "decision_making",
        "Decision Making",
        (
            "## About This Page",
            "Key decisions made over the course of the project, with the "
            "reasoning and the people involved.",
            "",
            "## Decision Log",
            "",
            "| Date | Decision | Rationale | Owner |",
            "|------|----------|-----------|-------|",
            "|      |          |           |       |",
        ),
    ),
    DocumentTemplate(
        "data_diagram",
        "Data Diagram",
        (
            "## About This Page",
            "How the project's data sources relate to each other.",
            "",
            "## Diagram",
            "",
            "```{mermaid}",
            "flowchart LR",
            "  A[Source 1] --> C[Analysis Dataset]",
            "  B[Source 2] --> C",
            "```",
        ),
    ),
)


def get_documents(extended: bool = False) -> list[DocumentTemplate]:
    """Return the documents for the base or extended layout, in nav order."""
    documents = list(BASE_DOCUMENTS)
    if extended:
        contact_index = next(
            i for i, doc in enumerate(documents) if doc.name == "contact"
        )
        documents[contact_index:contact_index] = EXTENDED_DOCUMENTS
    return documents

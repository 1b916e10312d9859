"""
Documents Context

Responsibilities:
- Loads the document preamble description
- Renders the LaTeX document template
- Streams rendered equations into the output .tex file

Owns: preamble config, document template, output file handling
Never: Runs dirac or the typesetter
"""

from diracdoc.contexts.documents.document import (
    DocumentEntry,
    load_preamble_config,
    resolve_output_name,
    write_document,
)
from diracdoc.contexts.documents.registries import DocumentTemplateRegistry

__all__ = [
    "DocumentEntry",
    "DocumentTemplateRegistry",
    "load_preamble_config",
    "resolve_output_name",
    "write_document",
]

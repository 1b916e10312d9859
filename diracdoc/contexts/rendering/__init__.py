"""
Rendering Context

Responsibilities:
- Typesets generated .tex files to PDF
- Parses compiler logs for errors and warnings

Owns: PDF generation
Never: Modifies document content
"""

from diracdoc.contexts.rendering.compiler import CompilationResult, typeset

__all__ = ["CompilationResult", "typeset"]

"""
diracdoc - LaTeX reports for the dirac Dirac-algebra calculator

Runs the external dirac executable once per expression and collects the
results into a typeset document.

Architecture:
- Invocation Context: command building, subprocess execution, equation formatting
- Documents Context: preamble config and streamed document templating
- Suites Context: test-suite and Fierz identity batches
- Rendering Context: PDF typesetting of generated documents
"""

__version__ = "0.1.0"

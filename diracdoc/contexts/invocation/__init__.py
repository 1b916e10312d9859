"""
Invocation Context

Responsibilities:
- Builds dirac command lines from named options
- Runs the dirac executable and captures its output
- Formats results (or verbatim failures) as LaTeX equations

Owns: command-line construction, subprocess execution, equation formatting
Never: Writes documents or runs the typesetter
"""

from diracdoc.contexts.invocation.exceptions import InvalidCaseError
from diracdoc.contexts.invocation.invocation import (
    ArithmeticMode,
    DiracInvocation,
    InvocationResult,
)

__all__ = ["ArithmeticMode", "DiracInvocation", "InvalidCaseError", "InvocationResult"]

"""Custom exceptions for the invocation context."""

from typing import Any, Mapping, Optional


class InvalidCaseError(ValueError):
    """
    Exception raised when a test case mapping cannot be turned into an invocation.

    Attributes:
        message: Error description
        case: The offending case mapping
    """

    def __init__(self, message: str, case: Optional[Mapping[str, Any]] = None):
        self.message = message
        self.case = case

        parts = [message]
        if case is not None:
            parts.append(f"Case: {dict(case)}")

        super().__init__("\n".join(parts))

"""
Shared utilities for diracdoc.

Common functionality used across contexts:
- Logger setup with provenance
- Timestamps for session directories
"""

from diracdoc.utils.timestamp import format_elapsed, now

__all__ = ["format_elapsed", "now"]

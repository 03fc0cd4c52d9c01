"""Diff engine exception hierarchy"""

from __future__ import annotations


class DiffEngineError(Exception):
    """Base exception for all diff engine errors"""


class PatchApplyError(DiffEngineError, ValueError):
    """Raised when a patch cannot be applied to the given text"""


class PatchConflictError(PatchApplyError):
    """Raised when hunk content does not match the text being patched"""

    def __init__(self, line_number: int, expected: str, actual: str | None):
        self.line_number = line_number
        self.expected = expected
        self.actual = actual
        super().__init__(f"patch conflict at line {line_number}")


class InvalidHunkError(PatchApplyError):
    """Raised for hunks that fall outside the text or overlap a previous hunk"""


class DiffInputTooLargeError(DiffEngineError, ValueError):
    """Raised when an input has more lines than the configured limit"""

from __future__ import annotations

"""
Scanner Error Taxonomy.

Defines the typed exceptions raised by the scanning layer. Every error carries
a ScanErrorKind so callers can branch on the category (I/O versus parse)
without inspecting the concrete class.
"""

from enum import Enum
from typing import Optional

# -----------------------------------------------------------------------------
# ERROR KINDS
# -----------------------------------------------------------------------------

class ScanErrorKind(str, Enum):
    """Category of a scanner failure."""
    IO = "io"
    PARSE = "parse"


# -----------------------------------------------------------------------------
# EXCEPTION HIERARCHY
# -----------------------------------------------------------------------------

class ScannerError(Exception):
    """
    Base class for all scanner failures.

    Attributes:
        kind: Failure category.
        line_number: Source line where the failure was detected (0 if unknown).
    """
    kind: ScanErrorKind = ScanErrorKind.IO

    def __init__(self, message: str, *, line_number: int = 0) -> None:
        super().__init__(message)
        self.line_number = line_number


class ScannerIOError(ScannerError, OSError):
    """The source could not be read, or a file could not be opened/created."""
    kind = ScanErrorKind.IO


class ScannerEOFError(ScannerIOError, EOFError):
    """A token was requested after the input was exhausted."""
    kind = ScanErrorKind.IO


class ScannerParseError(ScannerError, ValueError):
    """
    A token did not match the grammar of the requested type.

    Attributes:
        token: Raw text that was rejected.
        type_name: Display name of the requested type.
    """
    kind = ScanErrorKind.PARSE

    def __init__(
            self,
            token: str,
            type_name: str,
            *,
            line_number: int = 0,
            reason: Optional[str] = None,
    ) -> None:
        message = f"Cannot parse token {token!r} as {type_name} (line {line_number})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, line_number=line_number)
        self.token = token
        self.type_name = type_name

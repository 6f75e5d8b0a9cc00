from __future__ import annotations

"""
Token Result Domain Model.

Non-raising counterpart of TokenScanner.token(): a frozen value object that
reports either the parsed token or the failure that prevented it.
"""

from dataclasses import dataclass
from typing import Any, Optional

from tokenscanner.domain.errors import ScanErrorKind, ScannerError

# -----------------------------------------------------------------------------
# CORE DATA MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TokenResult:
    """
    Outcome of a single token request.

    Attributes:
        ok: Flag indicating success or failure.
        value: Parsed value (None on failure).
        error: Descriptive message in case of failure.
        error_kind: Failure category, None on success.
        token: Raw token text when one was consumed.
        line_number: Source line of the token or failure.
    """
    ok: bool
    value: Any = None
    error: str = ""
    error_kind: Optional[ScanErrorKind] = None
    token: Optional[str] = None
    line_number: int = 0

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(value: Any, token: str, line_number: int = 0) -> TokenResult:
    """Wrap a successfully parsed token."""
    return TokenResult(ok=True, value=value, token=token, line_number=line_number)


def create_error_result(exc: ScannerError) -> TokenResult:
    """
    Convert a scanner exception into a failed result.

    Args:
        exc: The error raised by the scanner.

    Returns:
        TokenResult: An immutable error result object.
    """
    return TokenResult(
        ok=False,
        error=str(exc),
        error_kind=exc.kind,
        token=getattr(exc, "token", None),
        line_number=exc.line_number,
    )

from __future__ import annotations

"""
tokenscanner: read whitespace separated tokens from files or the console.

    >>> from tokenscanner import TokenScanner
    >>> sc = TokenScanner.from_string("50 8")
    >>> sc.token(int) - sc.token(int)
    42
"""

from tokenscanner.core.parsers import (
    available_types,
    parse_bool,
    parse_float,
    parse_int,
    resolve_parser,
)
from tokenscanner.core.scanner import TokenScanner
from tokenscanner.domain.errors import (
    ScanErrorKind,
    ScannerEOFError,
    ScannerError,
    ScannerIOError,
    ScannerParseError,
)
from tokenscanner.domain.results import TokenResult
from tokenscanner.infra.files import scanner_from_file, scanner_from_stdin, writer_to_file

__version__ = "1.0.0"

__all__ = [
    "TokenScanner",
    "TokenResult",
    "ScanErrorKind",
    "ScannerError",
    "ScannerIOError",
    "ScannerEOFError",
    "ScannerParseError",
    "scanner_from_file",
    "scanner_from_stdin",
    "writer_to_file",
    "resolve_parser",
    "available_types",
    "parse_int",
    "parse_float",
    "parse_bool",
]

from __future__ import annotations

"""
File and Console Stream Factories.

Opens the buffered streams a TokenScanner reads from and the buffered
writers callers print results to. Open failures surface as ScannerIOError
before any token is requested.
"""

import logging
import sys
from typing import TextIO

from tokenscanner.core.scanner import TokenScanner
from tokenscanner.domain.errors import ScannerIOError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# INPUT FACTORIES
# -----------------------------------------------------------------------------

def scanner_from_file(filename: str, *, encoding: str = "utf-8") -> TokenScanner:
    """
    Open a file for buffered reading and wrap it in a TokenScanner.

    The scanner owns the file handle and closes it on close() or at the end
    of a ``with`` block.

    Args:
        filename: Path of the file to read.
        encoding: Text encoding of the file.

    Returns:
        TokenScanner: Scanner positioned at the start of the file.

    Raises:
        ScannerIOError: If the file cannot be opened.
    """
    try:
        handle = open(filename, "r", encoding=encoding)
    except (OSError, LookupError) as e:
        raise ScannerIOError(f"Cannot open '{filename}' for reading: {e}") from e

    logger.debug(f"Opened '{filename}' for token reading.")
    return TokenScanner(handle, encoding=encoding)


def scanner_from_stdin(*, encoding: str = "utf-8") -> TokenScanner:
    """
    Build a TokenScanner over the process standard input.

    Reads the underlying binary buffer when one is available so the decoding
    does not depend on the locale. Closing the scanner leaves stdin open.
    """
    source = getattr(sys.stdin, "buffer", sys.stdin)
    return TokenScanner(source, encoding=encoding, close_source=False)

# -----------------------------------------------------------------------------
# OUTPUT FACTORIES
# -----------------------------------------------------------------------------

def writer_to_file(filename: str, *, encoding: str = "utf-8") -> TextIO:
    """
    Open (create or truncate) a file for buffered text writing.

    Args:
        filename: Path of the file to write.
        encoding: Text encoding of the output.

    Returns:
        TextIO: Buffered writer owning the file handle.

    Raises:
        ScannerIOError: If the file cannot be created.
    """
    try:
        writer = open(filename, "w", encoding=encoding)
    except (OSError, LookupError) as e:
        raise ScannerIOError(f"Cannot create '{filename}' for writing: {e}") from e

    logger.debug(f"Opened '{filename}' for writing.")
    return writer

from __future__ import annotations

"""
Whitespace Token Scanner.

Reads a line-oriented source one line at a time and hands out the
whitespace-separated tokens of each line on demand, parsed into the type the
caller asks for. Pending tokens of the current line are kept in reverse order
so the next one is popped from the end of the list.
"""

import codecs
import io
import logging
from typing import IO, Any, Iterator, List, Optional, Union

from tokenscanner.core.parsers import ParserSpec, parser_name, resolve_parser
from tokenscanner.domain.errors import (
    ScannerEOFError,
    ScannerError,
    ScannerIOError,
    ScannerParseError,
)
from tokenscanner.domain.results import (
    TokenResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)

Source = Union[IO[str], IO[bytes]]


class TokenScanner:
    """
    Reads white space separated tokens one at a time.

    The scanner takes exclusive ownership of its source: close() (or leaving
    a ``with`` block) closes it unless the scanner was built with
    ``close_source=False``.
    """

    def __init__(
            self,
            source: Source,
            *,
            encoding: str = "utf-8",
            close_source: bool = True,
    ) -> None:
        self._source = source
        self._encoding = encoding
        self._close_source = close_source
        self._pending: List[str] = []
        self._last_token = ""
        self._line_number = 0
        self._exhausted = False
        self._closed = False
        # Byte sources only: decoded text not yet returned as a line
        self._decoder: Optional[codecs.IncrementalDecoder] = None
        self._decoded = ""

    @classmethod
    def from_string(cls, text: str) -> "TokenScanner":
        """Build a scanner over an in-memory string."""
        return cls(io.StringIO(text))

    # -------------------------------------------------------------------------
    # PROPERTIES
    # -------------------------------------------------------------------------

    @property
    def line_number(self) -> int:
        """Number of lines read from the source so far."""
        return self._line_number

    @property
    def closed(self) -> bool:
        return self._closed

    # -------------------------------------------------------------------------
    # TOKEN API
    # -------------------------------------------------------------------------

    def token(self, parser: ParserSpec = str) -> Any:
        """
        Return the next token parsed with ``parser``.

        Args:
            parser: A callable taking the token text (int, float, Fraction...)
                    or a registered type name ("int", "float", "str", "bool").

        Returns:
            Any: The parsed token.

        Raises:
            ScannerEOFError: The input is exhausted.
            ScannerIOError: The source could not be read.
            ScannerParseError: The parser rejected the token. The token is
                               consumed anyway.
        """
        parse = resolve_parser(parser)
        raw = self._next_raw()
        try:
            return parse(raw)
        except (ValueError, TypeError, ArithmeticError) as e:
            raise ScannerParseError(
                raw,
                parser_name(parse),
                line_number=self._line_number,
                reason=str(e) or None,
            ) from e

    def tokens(self, count: int, parser: ParserSpec = str) -> List[Any]:
        """Return the next ``count`` tokens, all parsed with ``parser``."""
        if count < 0:
            raise ValueError(f"count must be non-negative, received {count}.")
        parse = resolve_parser(parser)
        return [self.token(parse) for _ in range(count)]

    def try_token(self, parser: ParserSpec = str) -> TokenResult:
        """
        Non-raising variant of token().

        Scanner failures are reported through the returned TokenResult;
        an invalid ``parser`` argument still raises.
        """
        parse = resolve_parser(parser)
        try:
            value = self.token(parse)
        except ScannerError as e:
            logger.debug(f"Token request failed: {e}")
            return create_error_result(e)
        return create_success_result(value, self._last_token, self._line_number)

    def has_next(self) -> bool:
        """
        Report whether another token is available.

        May read further lines from the source, but never consumes a token.
        """
        return self._fill()

    def __iter__(self) -> Iterator[str]:
        """Yield raw tokens until the input is exhausted."""
        while self._fill():
            yield self._next_raw()

    # -------------------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Release the source. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._pending.clear()
        if self._close_source:
            self._source.close()

    def __enter__(self) -> "TokenScanner":
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"line={self._line_number}, pending={len(self._pending)}"
        return f"<TokenScanner {state}>"

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _next_raw(self) -> str:
        """Pop the next unparsed token, refilling from the source as needed."""
        if not self._fill():
            raise ScannerEOFError(
                f"Unexpected end of input after line {self._line_number}",
                line_number=self._line_number,
            )
        self._last_token = self._pending.pop()
        return self._last_token

    def _fill(self) -> bool:
        """
        Read lines until the pending list is non-empty or the source ends.

        Returns:
            bool: True if at least one token is pending.
        """
        if self._closed:
            raise ScannerIOError("I/O operation on a closed scanner", line_number=self._line_number)

        while not self._pending:
            if self._exhausted:
                return False
            line = self._read_line()
            if not line:
                self._exhausted = True
                logger.debug(f"End of input reached after {self._line_number} lines.")
                return False
            self._line_number += 1
            self._pending = line.split()
            self._pending.reverse()
            logger.debug(f"Line {self._line_number}: buffered {len(self._pending)} tokens.")
        return True

    def _read_line(self) -> str:
        """Read one line, decoding byte sources."""
        try:
            return self._read_text_line()
        except (OSError, ValueError, LookupError) as e:
            # UnicodeDecodeError and reads on a closed file are ValueErrors
            raise ScannerIOError(
                f"Failed to read line {self._line_number + 1}: {e}",
                line_number=self._line_number + 1,
            ) from e

    def _read_text_line(self) -> str:
        """
        Return the next line as text, or "" at end of input.

        A byte source's readline() splits at b"\\n", which is not a line
        boundary in multi-byte encodings such as UTF-16, so its chunks go
        through an incremental decoder and lines are cut from the text.
        """
        while True:
            newline = self._decoded.find("\n")
            if newline >= 0:
                line = self._decoded[:newline + 1]
                self._decoded = self._decoded[newline + 1:]
                return line

            chunk: Optional[Union[str, bytes]] = self._source.readline()
            if chunk is None or isinstance(chunk, str):
                return chunk or ""

            if self._decoder is None:
                self._decoder = codecs.getincrementaldecoder(self._encoding)()
            if not chunk:
                tail = self._decoded + self._decoder.decode(b"", final=True)
                self._decoded = ""
                return tail
            self._decoded += self._decoder.decode(chunk)

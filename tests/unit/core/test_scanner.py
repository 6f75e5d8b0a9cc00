from __future__ import annotations

"""
Unit tests for TokenScanner.

Verifies:
1. Token order across spaces, tabs, newlines and blank lines.
2. Typed parsing through callables and registered type names.
3. End-of-input and parse failures (no silent defaults, no spinning).
4. Non-raising try_token(), iteration, has_next() and lifecycle.
"""

import io
from fractions import Fraction

import pytest

from tokenscanner.core.scanner import TokenScanner
from tokenscanner.domain.errors import (
    ScanErrorKind,
    ScannerEOFError,
    ScannerIOError,
    ScannerParseError,
)

# -----------------------------------------------------------------------------
# ORDER AND SEPARATORS
# -----------------------------------------------------------------------------

def test_memory_scanner_difference(make_scanner) -> None:
    """'50 8' read as two ints yields 50 then 8."""
    scanner = make_scanner("50 8")

    x = scanner.token(int)
    y = scanner.token(int)

    assert (x, y) == (50, 8)
    assert f"Test: {x - y}\n" == "Test: 42\n"


def test_blank_lines_between_tokens(make_scanner) -> None:
    scanner = make_scanner("7\n\n\n3\n")

    assert scanner.token(int) == 7
    assert scanner.token(int) == 3


def test_all_whitespace_runs_are_separators(make_scanner) -> None:
    scanner = make_scanner("  a\tb   c\n\n  \t \nd\r\ne  ")

    assert [scanner.token() for _ in range(5)] == ["a", "b", "c", "d", "e"]


def test_tokens_split_across_lines_keep_order(make_scanner) -> None:
    scanner = make_scanner("1 2\n3\n4 5 6\n")

    assert scanner.tokens(6, int) == [1, 2, 3, 4, 5, 6]


def test_mixed_types_in_sequence(make_scanner) -> None:
    scanner = make_scanner("3 2.5 hello true\n")

    assert scanner.token("int") == 3
    assert scanner.token(float) == 2.5
    assert scanner.token() == "hello"
    assert scanner.token("bool") is True


def test_custom_parser_callable(make_scanner) -> None:
    scanner = make_scanner("1/3 2/3")

    assert scanner.token(Fraction) + scanner.token(Fraction) == 1


def test_byte_source_is_decoded() -> None:
    scanner = TokenScanner(io.BytesIO("5 été\n".encode("utf-8")))

    assert scanner.token(int) == 5
    assert scanner.token() == "été"


def test_utf16_byte_source_is_decoded_across_lines() -> None:
    data = "1 2\n3 4\n".encode("utf-16")
    scanner = TokenScanner(io.BytesIO(data), encoding="utf-16")

    assert scanner.tokens(4, int) == [1, 2, 3, 4]
    assert scanner.line_number == 2
    assert scanner.has_next() is False


def test_utf16_char_containing_newline_byte() -> None:
    """U+0A0A encodes to b"\\n\\n" in UTF-16-LE; it is not a line break."""
    data = "\u0a0a 5\n\n7".encode("utf-16-le")
    scanner = TokenScanner(io.BytesIO(data), encoding="utf-16-le")

    assert scanner.token() == "\u0a0a"
    assert scanner.token(int) == 5
    assert scanner.token(int) == 7
    assert scanner.line_number == 3


def test_utf32_byte_source_with_blank_lines() -> None:
    data = "été\n\n\n42".encode("utf-32")
    scanner = TokenScanner(io.BytesIO(data), encoding="utf-32")

    assert list(scanner) == ["été", "42"]


def test_unknown_encoding_on_byte_source_is_io_error() -> None:
    scanner = TokenScanner(io.BytesIO(b"1\n"), encoding="no-such-codec")

    with pytest.raises(ScannerIOError):
        scanner.token()


def test_line_number_tracks_lines_read(make_scanner) -> None:
    scanner = make_scanner("1\n\n2 3\n")

    scanner.token()
    assert scanner.line_number == 1
    scanner.token()
    assert scanner.line_number == 3
    scanner.token()
    assert scanner.line_number == 3

# -----------------------------------------------------------------------------
# FAILURES
# -----------------------------------------------------------------------------

def test_empty_input_raises_eof(make_scanner) -> None:
    scanner = make_scanner("")

    with pytest.raises(ScannerEOFError) as exc_info:
        scanner.token(int)
    assert exc_info.value.kind is ScanErrorKind.IO


def test_exhausted_input_raises_eof(make_scanner) -> None:
    scanner = make_scanner("1\n")
    scanner.token(int)

    with pytest.raises(ScannerEOFError):
        scanner.token(int)


def test_trailing_whitespace_lines_end_in_eof(make_scanner) -> None:
    """Whitespace-only lines at the end must not loop forever."""
    scanner = make_scanner("1\n   \n\t\n\n")
    scanner.token(int)

    with pytest.raises(ScannerEOFError):
        scanner.token(int)
    # Still EOF on a second request
    with pytest.raises(ScannerEOFError):
        scanner.token()


def test_eof_is_an_io_error(make_scanner) -> None:
    with pytest.raises(ScannerIOError):
        make_scanner("").token()
    with pytest.raises(EOFError):
        make_scanner("").token()


def test_parse_failure_reports_token_and_line(make_scanner) -> None:
    scanner = make_scanner("1\nabc 2\n")
    scanner.token(int)

    with pytest.raises(ScannerParseError) as exc_info:
        scanner.token(int)

    err = exc_info.value
    assert err.token == "abc"
    assert err.type_name == "int"
    assert err.line_number == 2
    assert err.kind is ScanErrorKind.PARSE
    assert isinstance(err, ValueError)


def test_rejected_token_is_consumed(make_scanner) -> None:
    scanner = make_scanner("x 4")

    with pytest.raises(ScannerParseError):
        scanner.token(int)
    assert scanner.token(int) == 4


def test_unknown_type_name_does_not_consume(make_scanner) -> None:
    scanner = make_scanner("9")

    with pytest.raises(ValueError, match="Unknown token type"):
        scanner.token("complex128")
    assert scanner.token(int) == 9


def test_read_failure_raises_scanner_io_error() -> None:
    class BrokenSource:
        def readline(self):
            raise OSError("device gone")

        def close(self):
            pass

    scanner = TokenScanner(BrokenSource())

    with pytest.raises(ScannerIOError, match="device gone") as exc_info:
        scanner.token()
    assert isinstance(exc_info.value.__cause__, OSError)


def test_undecodable_bytes_raise_scanner_io_error() -> None:
    scanner = TokenScanner(io.BytesIO(b"\xff\xfe 1\n"), encoding="utf-8")

    with pytest.raises(ScannerIOError):
        scanner.token()


def test_negative_count_rejected(make_scanner) -> None:
    with pytest.raises(ValueError):
        make_scanner("1").tokens(-1)

# -----------------------------------------------------------------------------
# NON-RAISING API AND ITERATION
# -----------------------------------------------------------------------------

def test_try_token_success(make_scanner) -> None:
    result = make_scanner("\n12\n").try_token(int)

    assert result.ok is True
    assert result.value == 12
    assert result.token == "12"
    assert result.line_number == 2
    assert result.error_kind is None


def test_try_token_parse_failure(make_scanner) -> None:
    result = make_scanner("1.5").try_token(int)

    assert result.ok is False
    assert result.value is None
    assert result.error_kind is ScanErrorKind.PARSE
    assert result.token == "1.5"
    assert "1.5" in result.error


def test_try_token_eof(make_scanner) -> None:
    result = make_scanner("  \n").try_token(int)

    assert result.ok is False
    assert result.error_kind is ScanErrorKind.IO
    assert result.token is None


def test_iteration_yields_raw_tokens_until_eof(make_scanner) -> None:
    assert list(make_scanner("a b\n\nc\n")) == ["a", "b", "c"]


def test_has_next_does_not_consume(make_scanner) -> None:
    scanner = make_scanner("\n\n5\n")

    assert scanner.has_next() is True
    assert scanner.has_next() is True
    assert scanner.token(int) == 5
    assert scanner.has_next() is False


def test_from_string() -> None:
    scanner = TokenScanner.from_string("-3 +4")

    assert scanner.token(int) + scanner.token(int) == 1

# -----------------------------------------------------------------------------
# LIFECYCLE
# -----------------------------------------------------------------------------

def test_context_manager_closes_source() -> None:
    source = io.StringIO("1 2")
    with TokenScanner(source) as scanner:
        assert scanner.token(int) == 1

    assert scanner.closed is True
    assert source.closed is True


def test_close_source_false_leaves_source_open() -> None:
    source = io.StringIO("1")
    scanner = TokenScanner(source, close_source=False)
    scanner.close()
    scanner.close()

    assert scanner.closed is True
    assert source.closed is False


def test_token_after_close_raises(make_scanner) -> None:
    scanner = make_scanner("1 2")
    scanner.token()
    scanner.close()

    with pytest.raises(ScannerIOError, match="closed"):
        scanner.token()

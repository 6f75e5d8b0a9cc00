from __future__ import annotations

"""
Token Parser Registry.

A parser is any callable that turns the text of one token into a value and
raises ValueError (or TypeError) when the text does not fit. The registry maps
the type names accepted by the CLI and by TokenScanner.token() to strict
parsers for the primitive types.
"""

import re
from typing import Any, Callable, Dict, List, Union

Parser = Callable[[str], Any]
ParserSpec = Union[str, Parser]

# Python's int()/float() accept digit-group underscores ("1_000"); token input does not.
_INT_PATTERN = re.compile(r"[+-]?[0-9]+\Z")

# -----------------------------------------------------------------------------
# PRIMITIVE PARSERS
# -----------------------------------------------------------------------------

def parse_int(text: str) -> int:
    """Parse a decimal integer with an optional sign."""
    if not _INT_PATTERN.match(text):
        raise ValueError(f"invalid integer literal: {text!r}")
    return int(text)


def parse_float(text: str) -> float:
    """Parse a floating point literal (inf/nan included)."""
    if "_" in text:
        raise ValueError(f"invalid float literal: {text!r}")
    return float(text)


def parse_str(text: str) -> str:
    return text


def parse_bool(text: str) -> bool:
    """Accept exactly 'true' or 'false'."""
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"invalid boolean literal: {text!r}")


_REGISTRY: Dict[str, Parser] = {
    "int": parse_int,
    "float": parse_float,
    "str": parse_str,
    "bool": parse_bool,
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def available_types() -> List[str]:
    """Return the registered type names in registration order."""
    return list(_REGISTRY)


def resolve_parser(spec: ParserSpec) -> Parser:
    """
    Turn a parser specification into a callable.

    Args:
        spec: A registered type name ("int", "float", "str", "bool") or any
              callable taking the token text.

    Returns:
        Parser: The callable to apply to each token.

    Raises:
        ValueError: Unknown type name.
        TypeError: Neither a string nor a callable.
    """
    if isinstance(spec, str):
        try:
            return _REGISTRY[spec.strip().lower()]
        except KeyError:
            known = ", ".join(_REGISTRY)
            raise ValueError(f"Unknown token type '{spec}'. Expected one of: {known}.") from None
    if callable(spec):
        return spec
    raise TypeError(f"Parser must be a type name or a callable, received {type(spec).__name__}.")


def parser_name(parser: Parser) -> str:
    """Human readable name of a parser, used in error messages."""
    for name, registered in _REGISTRY.items():
        if registered is parser:
            return name
    return getattr(parser, "__name__", None) or type(parser).__name__

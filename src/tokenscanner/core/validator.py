from __future__ import annotations

"""
Configuration Validation.

Normalizes an untrusted configuration dictionary (CLI overrides merged over
defaults) into strictly typed values. In lenient mode invalid fields fall
back to their defaults and a warning is collected; in strict mode the first
invalid field raises.
"""

import codecs
import logging
from typing import Any, Dict, List, Optional, Tuple

from tokenscanner.core.parsers import available_types
from tokenscanner.domain.config import get_default_config
from tokenscanner.infra.logging import LEVEL_NAMES

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: Raise TypeError/ValueError instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          the collected warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in ("input_path", "output_path"):
        merged[field] = _as_optional_str(merged.get(field), field, warnings, strict)

    merged["json_output"] = _as_bool(
        merged.get("json_output"), defaults["json_output"], "json_output", warnings, strict
    )
    merged["count"] = _as_count(merged.get("count"), warnings, strict)

    merged["token_type"] = _as_choice(
        merged.get("token_type"), available_types(), defaults["token_type"],
        "token_type", warnings, strict,
    )
    merged["log_level"] = _as_choice(
        merged.get("log_level"), list(LEVEL_NAMES), defaults["log_level"],
        "log_level", warnings, strict,
    )
    merged["encoding"] = _as_encoding(merged.get("encoding"), defaults["encoding"], warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _reject(msg: str, warnings: List[str], strict: bool, exc: type = TypeError) -> None:
    if strict:
        raise exc(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    """None and blank strings mean 'use the console stream'."""
    if value is None:
        return None
    if isinstance(value, str):
        v = value.strip()
        return v or None
    _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return None


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict and isinstance(value, str):
        s = value.strip().lower()
        if s in ("true", "1", "yes", "y"):
            warnings.append(f"Field '{field}' converted from '{value}' to True.")
            return True
        if s in ("false", "0", "no", "n"):
            warnings.append(f"Field '{field}' converted from '{value}' to False.")
            return False

    _reject(f"Invalid field '{field}': expected bool, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_count(value: Any, warnings: List[str], strict: bool) -> Optional[int]:
    """A non-negative token count, or None for 'read until end of input'."""
    if value is None:
        return None
    if isinstance(value, str) and not strict:
        try:
            value = int(value.strip())
            warnings.append("Field 'count' converted from string to int.")
        except ValueError:
            pass
    if isinstance(value, bool) or not isinstance(value, int):
        _reject(f"Invalid field 'count': expected int, received {type(value).__name__}.", warnings, strict)
        return None
    if value < 0:
        _reject(f"Invalid field 'count': must be >= 0, received {value}.", warnings, strict, ValueError)
        return None
    return value


def _as_choice(
        value: Any,
        choices: List[str],
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    """Case-insensitive membership check returning the canonical spelling."""
    if value is None:
        return fallback
    if isinstance(value, str):
        for choice in choices:
            if value.strip().lower() == choice.lower():
                return choice
    _reject(
        f"Invalid field '{field}': {value!r} is not one of {', '.join(choices)}.",
        warnings, strict, ValueError,
    )
    return fallback


def _as_encoding(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str) and value.strip():
        try:
            return codecs.lookup(value.strip()).name
        except LookupError:
            pass
    _reject(f"Invalid field 'encoding': unknown codec {value!r}.", warnings, strict, ValueError)
    return fallback

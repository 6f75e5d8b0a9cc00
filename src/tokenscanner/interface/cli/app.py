from __future__ import annotations

"""
Command Line Application Controller.

Orchestrates a CLI run: logging bootstrap, configuration merge and
validation, token scanning, and rendering of the parsed tokens. Scanner
failures are mapped to exit codes here instead of escaping as tracebacks.
"""

import json
import math
import sys
from contextlib import ExitStack
from typing import Any, Dict, List, Optional, TextIO

from tokenscanner.core.parsers import resolve_parser
from tokenscanner.core.scanner import TokenScanner
from tokenscanner.core.validator import validate_config
from tokenscanner.domain.config import CONFIG_KEYS, get_default_config
from tokenscanner.domain.errors import ScannerIOError, ScannerParseError
from tokenscanner.infra.files import scanner_from_file, scanner_from_stdin, writer_to_file
from tokenscanner.infra.logging import LoggingConfig, configure_logging, get_logger
from tokenscanner.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_IO_ERROR = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)
    conf, warnings = validate_config(raw_conf, strict=False)

    configure_logging(LoggingConfig(level=conf["log_level"], console=True))
    for w in warnings:
        logger.warning(f"Configuration constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    try:
        with ExitStack() as stack:
            scanner = stack.enter_context(_open_scanner(conf))
            values = _read_tokens(scanner, conf)
            payload = _render(values, json_output=conf["json_output"])
            out = _open_output(conf, stack)
            out.write(payload)
            out.flush()
    except ScannerParseError as e:
        logger.debug(f"Parse failure: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    except ScannerIOError as e:
        logger.debug(f"I/O failure: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_IO_ERROR
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    logger.info(f"Wrote {len(values)} tokens.")
    return EXIT_OK

# -----------------------------------------------------------------------------
# PIPELINE STEPS
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of known, non-None override values into ``base``."""
    out = dict(base)
    for k in CONFIG_KEYS:
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out


def _open_scanner(conf: Dict[str, Any]) -> TokenScanner:
    if conf["input_path"]:
        return scanner_from_file(conf["input_path"], encoding=conf["encoding"])
    return scanner_from_stdin(encoding=conf["encoding"])


def _open_output(conf: Dict[str, Any], stack: ExitStack) -> TextIO:
    if conf["output_path"]:
        return stack.enter_context(writer_to_file(conf["output_path"], encoding=conf["encoding"]))
    return sys.stdout


def _read_tokens(scanner: TokenScanner, conf: Dict[str, Any]) -> List[Any]:
    """Read ``count`` tokens, or every remaining token when count is None."""
    parse = resolve_parser(conf["token_type"])
    if conf["count"] is not None:
        return scanner.tokens(conf["count"], parse)
    values: List[Any] = []
    while scanner.has_next():
        values.append(scanner.token(parse))
    return values


def _render(values: List[Any], *, json_output: bool) -> str:
    """
    Format the parsed tokens, one per line or as a JSON array.

    Raises:
        ScannerParseError: A non-finite float has no JSON representation.
    """
    if json_output:
        for v in values:
            if isinstance(v, float) and not math.isfinite(v):
                raise ScannerParseError(str(v), "JSON number", reason="not representable in JSON")
        return json.dumps(values, ensure_ascii=False, allow_nan=False) + "\n"
    return "".join(f"{_format_value(v)}\n" for v in values)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


if __name__ == "__main__":
    sys.exit(main())

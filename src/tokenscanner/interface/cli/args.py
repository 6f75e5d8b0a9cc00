from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command line schema and translates the parsed namespace into
configuration overrides understood by validate_config().
"""

import argparse
from typing import Any, Dict

from tokenscanner.core.parsers import available_types

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the tokenscanner CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="tokenscanner",
        description="Read whitespace separated tokens, parse them and print one per line.",
    )

    # --- Streams ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="File to read tokens from (default: standard input).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="File to write parsed tokens to (default: standard output).",
    )
    p.add_argument(
        "--encoding",
        default=None,
        help="Text encoding of input and output files (default: utf-8).",
    )

    # --- Token handling ---
    p.add_argument(
        "-t", "--type",
        dest="token_type",
        choices=available_types(),
        default=None,
        help="Type every token is parsed as (default: str).",
    )
    p.add_argument(
        "-n", "--count",
        type=int,
        default=None,
        help="Read exactly COUNT tokens; running out of input is an error.",
    )

    # --- Output and diagnostics ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Write the parsed tokens as a JSON array.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Options left at their argparse default map to None, which the merge step
    skips.
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "output_path": args.output_path,
        "encoding": args.encoding,
        "token_type": args.token_type,
        "count": args.count,
    }

    if args.json_output:
        overrides["json_output"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides

from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI and installs a process-wide exception hook.
Scanner errors are raised, never swallowed, by the library; when one escapes
the caller unhandled, the hook logs it, prints a banner with the traceback
and terminates the process with status 1.
"""

import logging
import sys
import traceback
from types import TracebackType
from typing import List, Optional, Type

from tokenscanner.domain.errors import ScannerError

EXIT_FATAL = 1

# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(
        exctype: Type[BaseException],
        value: BaseException,
        tb: Optional[TracebackType],
) -> None:
    """
    Report an unhandled exception and terminate the process.

    KeyboardInterrupt is passed to the default hook untouched.
    """
    if issubclass(exctype, KeyboardInterrupt):
        sys.__excepthook__(exctype, value, tb)
        return

    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    logger = logging.getLogger("tokenscanner.supervisor")
    logger.critical(f"Fatal error: {value}")

    if isinstance(value, ScannerError):
        title = f"FATAL SCANNER ERROR ({value.kind.value})"
    else:
        title = "FATAL ERROR"

    print("=" * 80, file=sys.stderr)
    print(f"{title} (TOKENSCANNER)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)
    sys.exit(EXIT_FATAL)


def install_fatal_handler() -> None:
    """Make unhandled exceptions terminate through global_exception_handler."""
    sys.excepthook = global_exception_handler

# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line interface under the global supervisor.

    Returns:
        int: Process exit code.
    """
    install_fatal_handler()
    from tokenscanner.interface.cli.app import main as cli_main

    try:
        return cli_main(argv)
    except Exception as e:
        global_exception_handler(type(e), e, e.__traceback__)
        return EXIT_FATAL


if __name__ == "__main__":
    sys.exit(main())

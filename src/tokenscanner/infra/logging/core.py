from __future__ import annotations

"""
Logging Lifecycle.

configure_logging() attaches a single QueueHandler to the root logger and
fans records out to the real handlers from a QueueListener thread, so
writing a log file never stalls token reading. Configuration is idempotent:
repeated calls are no-ops unless ``force`` is given.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from tokenscanner.infra.logging.config import _LEVEL_MAP, LoggingConfig
from tokenscanner.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_tokenscanner_configured"
_QUEUE_LISTENER_ATTR: str = "_tokenscanner_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        cfg: Logging settings.
        force: Tear down a previous configuration and apply ``cfg``.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    try:
        level_int = _parse_level(cfg.level)
        root.setLevel(level_int)

        _remove_our_handlers(root)
        _stop_existing_listener(root)

        handlers_list: List[logging.Handler] = []
        if cfg.console:
            handlers_list.append(
                _create_console_handler(level_int, logging.Formatter(cfg.console_fmt))
            )
        if cfg.log_file:
            fh = _create_rotating_file_handler(
                cfg.log_file,
                level_int,
                logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
                cfg.max_bytes,
                cfg.backup_count,
            )
            if fh:
                handlers_list.append(fh)

        if not handlers_list:
            return root

        log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
        queue_handler = _tag_handler(QueueHandler(log_queue))

        listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
        listener.start()

        root.addHandler(queue_handler)
        setattr(root, _QUEUE_LISTENER_ATTR, listener)
        setattr(root, _CONFIGURED_FLAG_ATTR, True)

        # Flush pending records at interpreter exit
        atexit.register(_safe_stop_listener, listener)
        return root

    except (OSError, RuntimeError, ValueError) as e:
        # Fall back to a plain synchronous console handler
        _remove_our_handlers(root)
        sh = _create_console_handler(
            logging.INFO, logging.Formatter("FALLBACK | %(levelname)s | %(message)s")
        )
        root.addHandler(sh)
        root.warning(f"Logging setup failed ({e}); using console fallback.")
        return root


def get_logger(name: str) -> logging.Logger:
    """Return the named logger (usually ``__name__``)."""
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Stop the queue listener and detach our handlers, flushing pending records."""
    root = logging.getLogger()
    _stop_existing_listener(root)
    _remove_our_handlers(root)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a level name to its numeric constant (INFO when unknown)."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _remove_our_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a listener, tolerating one that was already stopped."""
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
    for h in listener.handlers:
        h.close()

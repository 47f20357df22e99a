from __future__ import annotations

"""
Logging bootstrap for the CLI.

Records go through a single QueueHandler on the root logger; a
QueueListener thread hands them to a stderr stream and, when requested, a
rotating log file. Handlers installed here carry a tag so that
reconfiguration only replaces our own.
"""

import atexit
import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from typing import List, Optional

from glslbatch.infra.logging.config import _LEVEL_MAP, LoggingConfig

_HANDLER_TAG_ATTR: str = "_glslbatch_handler"
_CONFIGURED_FLAG_ATTR: str = "_glslbatch_configured"
_QUEUE_LISTENER_ATTR: str = "_glslbatch_queue_listener"


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Install the queue-backed handlers on the root logger.

    Calling it again is a no-op unless ``force`` is set, in which case the
    previous handlers and listener are torn down first.

    Args:
        cfg: Level, destinations and formats.
        force: Replace an existing configuration.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level = _LEVEL_MAP.get((cfg.level or "").strip().upper(), logging.INFO)
    root.setLevel(level)
    _teardown(root)

    sinks: List[logging.Handler] = []
    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(cfg.console_fmt))
        sinks.append(console)
    if cfg.log_file:
        file_handler = _open_log_file(cfg)
        if file_handler:
            sinks.append(file_handler)
    if not sinks:
        return root

    for sink in sinks:
        sink.setLevel(level)

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = QueueHandler(log_queue)
    setattr(queue_handler, _HANDLER_TAG_ATTR, True)

    listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
    listener.start()
    atexit.register(_stop_listener, listener)

    root.addHandler(queue_handler)
    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Drain the queue so every pending record reaches its handler."""
    root = logging.getLogger()
    _stop_listener(getattr(root, _QUEUE_LISTENER_ATTR, None))
    setattr(root, _QUEUE_LISTENER_ATTR, None)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _open_log_file(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    """A log file that cannot be opened degrades to console-only logging."""
    try:
        parent = os.path.dirname(os.path.abspath(cfg.log_file))
        os.makedirs(parent, exist_ok=True)
        handler = RotatingFileHandler(
            cfg.log_file,
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{cfg.log_file}': {e}\n")
        return None
    handler.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
    return handler


def _teardown(root: logging.Logger) -> None:
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_TAG_ATTR, False):
            root.removeHandler(handler)
            handler.close()
    shutdown_logging()


def _stop_listener(listener: Optional[QueueListener]) -> None:
    # atexit and shutdown_logging may both reach the same listener
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()

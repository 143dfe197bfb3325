"""Centralized logging bootstrap for the ui-board runtime.

The TUI owns the terminal, so the stderr handler only carries warnings and
above; everything at the configured level goes to a rotating file.

// [LAW:single-enforcer] Logger handler wiring is enforced in this module only.
// [LAW:one-source-of-truth] Runtime log path/level are derived here and returned to callers.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path


@dataclass(frozen=True)
class LoggingRuntime:
    """Resolved runtime logging configuration."""

    level_name: str
    level: int
    file_path: str


_RUNTIME: LoggingRuntime | None = None

# Libraries that log through the root hierarchy while the TUI owns the terminal.
THIRD_PARTY_LOGGERS: tuple[str, ...] = ("PIL", "asyncio", "textual")


def _parse_level(raw: str) -> tuple[str, int]:
    normalized = str(raw or "INFO").strip().upper()
    level = getattr(logging, normalized, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    return str(logging.getLevelName(level)), int(level)


def _default_log_path() -> str:
    log_dir = Path(
        os.environ.get("UI_BOARD_LOG_DIR", os.path.expanduser("~/.local/share/ui-board/logs"))
    )
    ts = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return str(log_dir / f"ui-board-{ts}-{os.getpid()}.log")


def _make_stream_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(logging.WARNING)
    handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s %(message)s"))
    return handler


def _make_file_handler(level: int, file_path: str) -> logging.Handler:
    handler = RotatingFileHandler(
        file_path,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def _route_third_party(level: int, file_handler: logging.Handler) -> None:
    """Hold library loggers at WARNING (or the stricter board level) and log them to the board file."""
    floor = max(level, logging.WARNING)
    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(floor)
    root = logging.getLogger()
    if root.level < floor:
        root.setLevel(floor)
    # The TUI owns stderr; library records go to the file only.
    if file_handler not in root.handlers:
        root.addHandler(file_handler)


def configure() -> LoggingRuntime:
    """Configure the ui_board logger hierarchy with stderr + rotating file handlers.

    Third-party loggers are held at WARNING or stricter so a DEBUG board
    log is not flooded by image decoding or event-loop chatter.

    Idempotent: repeated calls return the originally configured runtime.
    """
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    level_name, level = _parse_level(os.environ.get("UI_BOARD_LOG_LEVEL", "INFO"))
    file_path = os.environ.get("UI_BOARD_LOG_FILE") or _default_log_path()
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)

    # [LAW:single-enforcer] All ui_board module loggers propagate to this one logger.
    logger = logging.getLogger("ui_board")
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()
    file_handler = _make_file_handler(level, file_path)
    logger.addHandler(_make_stream_handler())
    logger.addHandler(file_handler)

    _route_third_party(level, file_handler)

    logging.captureWarnings(True)

    _RUNTIME = LoggingRuntime(level_name=level_name, level=level, file_path=file_path)
    return _RUNTIME


def get_runtime() -> LoggingRuntime | None:
    """Return configured logging runtime, if configure() has run."""
    return _RUNTIME

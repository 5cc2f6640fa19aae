from __future__ import annotations

"""Small logging helpers to standardize ldproxy logger names and configuration.

This module provides:
    - ColorLogFormatter: message-only formatter with optional ANSI coloring.
    - parse_log_filter: LDPROXY_LOG parsing (env_logger-like syntax).
    - resolve_color: LDPROXY_LOG_STYLE handling ('auto', 'always', 'never').
    - setup_base_logger: Root logger configuration for the 'ldproxy' logger.
    - get_logger: Namespaced logger factory ('ldproxy.*').

Design notes:
    - Records carry no timestamp, level or module prefix: the compiler driver
      shows linker output verbatim, so messages stay as short as possible.
    - A filter of 'off' silences logging entirely; fatal diagnostics are
      still printed by the CLI.
"""

import logging
import sys
from typing import Mapping, Optional, TextIO

from ldproxy.constants import DEFAULT_LOG_FILTER, DEFAULT_LOG_STYLE, LOG_ENV_VAR, LOG_STYLE_ENV_VAR

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

OFF = logging.CRITICAL + 10

_LEVELS = {
    "off": OFF,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}

_COLORS = {
    TRACE: "\x1b[35m",
    logging.DEBUG: "\x1b[34m",
    logging.INFO: "\x1b[32m",
    logging.WARNING: "\x1b[33m",
    logging.ERROR: "\x1b[31m",
    logging.CRITICAL: "\x1b[1;31m",
}
_RESET = "\x1b[0m"


class ColorLogFormatter(logging.Formatter):
    """Emit the bare message, colored by level when enabled."""

    def __init__(self, *, color: bool = False) -> None:
        super().__init__("%(message)s")
        self._color = bool(color)

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if not self._color:
            return text
        prefix = _COLORS.get(record.levelno)
        if prefix is None:
            return text
        return f"{prefix}{text}{_RESET}"


def parse_log_filter(spec: Optional[str], *, default: int = logging.INFO) -> int:
    """Translate an LDPROXY_LOG value into a logging level.

    The value is a comma separated list of `level` or `target=level` entries.
    Bare levels and entries targeting 'ldproxy' (or one of its children)
    apply, the last applicable one wins. Anything unparseable leaves `default`.

    Examples:
        >>> parse_log_filter("debug") == logging.DEBUG
        True
        >>> parse_log_filter("warn,ldproxy=trace") == TRACE
        True
        >>> parse_log_filter("other=debug") == logging.INFO
        True
    """
    level = default
    if not spec:
        return level
    for entry in spec.split(","):
        entry = entry.strip()
        if not entry:
            continue
        if "=" in entry:
            target, _, value = entry.partition("=")
            target = target.strip()
            if target != "ldproxy" and not target.startswith("ldproxy::") and not target.startswith("ldproxy."):
                continue
        else:
            value = entry
        resolved = _LEVELS.get(value.strip().lower())
        if resolved is not None:
            level = resolved
    return level


def resolve_color(style: Optional[str], stream: Optional[TextIO] = None) -> bool:
    """Decide whether to colorize output for the given LDPROXY_LOG_STYLE."""
    mode = (style or "auto").strip().lower()
    if mode == "always":
        return True
    if mode == "never":
        return False
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty()) if callable(isatty) else False
    except ValueError:
        # closed stream
        return False


def setup_base_logger(
    *, level: int = logging.INFO, color: bool = False, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'ldproxy' logger once and return it.

    Args:
        level: Logging level for the base logger.
        color: Whether records are wrapped in ANSI color escapes.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger("ldproxy")
    if base.handlers:
        base.setLevel(level)
        return base

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ColorLogFormatter(color=color))
    base.addHandler(handler)

    return base


def config_from_env(environ: Mapping[str, str], stream: Optional[TextIO] = None) -> tuple[int, bool]:
    """Return (level, color) derived from LDPROXY_LOG / LDPROXY_LOG_STYLE."""
    level = parse_log_filter(environ.get(LOG_ENV_VAR, DEFAULT_LOG_FILTER))
    color = resolve_color(environ.get(LOG_STYLE_ENV_VAR, DEFAULT_LOG_STYLE), stream)
    return level, color


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'ldproxy'."""
    if not name or name == "ldproxy":
        return logging.getLogger("ldproxy")
    if name.startswith("ldproxy"):
        return logging.getLogger(name)
    return logging.getLogger(f"ldproxy.{name}")

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Optional, TextIO

from ldproxy.logging.helpers import config_from_env, setup_base_logger, get_logger


class DefaultLoggerFactory:
    """Factory that configures and returns project-scoped loggers.

    This implementation delegates base configuration to `setup_base_logger`
    in order to avoid duplication and keep behavior centralized.
    """

    def __init__(self, *, level: int = logging.INFO, color: bool = False, stream: Optional[TextIO] = None) -> None:
        self._level = int(level)
        self._color = bool(color)
        self._stream: Optional[TextIO] = stream
        self._configured = False

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, *, stream: Optional[TextIO] = None
    ) -> "DefaultLoggerFactory":
        """Build a factory honoring LDPROXY_LOG and LDPROXY_LOG_STYLE."""
        target = stream or sys.stderr
        level, color = config_from_env(os.environ if environ is None else environ, target)
        return cls(level=level, color=color, stream=target)

    @property
    def level(self) -> int:
        return self._level

    def _ensure_config(self) -> None:
        if self._configured:
            return
        setup_base_logger(level=self._level, color=self._color, stream=self._stream)
        self._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        self._ensure_config()
        # Route through helper to keep naming unified.
        return get_logger(name)

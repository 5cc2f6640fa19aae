from __future__ import annotations

import logging
import os
import shutil
from typing import Mapping, Optional, Sequence

from ldproxy.constants import GENERIC_CC_ENV_VAR, KNOWN_LINKERS, LINKER_FLAG, TARGET_CC_ENV_VARS
from ldproxy.core.errors import LinkerNotFoundError
from ldproxy.logging.helpers import get_logger


class LinkerResolver:
    """Resolve the real linker executable.

    Resolution order:
        1) explicit '--ldproxy-linker' value
        2) target specific CC_* variables (RISC-V ESP-IDF targets)
        3) CC
        4) first well-known linker basename found on PATH
    """

    def __init__(
        self,
        *,
        environ: Optional[Mapping[str, str]] = None,
        env_vars: Sequence[str] = (*TARGET_CC_ENV_VARS, GENERIC_CC_ENV_VAR),
        candidates: Sequence[str] = KNOWN_LINKERS,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._env_vars = tuple(env_vars)
        self._candidates = tuple(candidates)
        self._log = logger or get_logger("discovery.linker")

    def from_environment(self) -> Optional[str]:
        for name in self._env_vars:
            value = self._environ.get(name)
            if value:
                self._log.debug("Linker from %s: %s", name, value)
                return value
        return None

    def from_path(self) -> Optional[str]:
        search_path = self._environ.get("PATH")
        for candidate in self._candidates:
            if shutil.which(candidate, path=search_path) is not None:
                self._log.debug("Linker found on PATH: %s", candidate)
                return candidate
        return None

    def resolve(self, explicit: Optional[str] = None) -> str:
        if explicit:
            return explicit
        linker = self.from_environment() or self.from_path()
        if linker is None:
            raise LinkerNotFoundError(LINKER_FLAG)
        return linker

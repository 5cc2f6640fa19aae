from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from ldproxy.constants import CWD_MARKER, FLAG_PREFIX, LINK_ARG_DIRECTIVE, LINKER_MARKER
from ldproxy.core.models import BuildOutputDirectives
from ldproxy.logging.helpers import get_logger


class BuildOutputParser:
    """Parser for the `output` file a cargo build script leaves behind.

    Only `cargo:rustc-link-arg=<value>` lines are directives; every other line
    is ignored. Two marker values take their payload from the next directive
    line:

        cargo:rustc-link-arg=--ldproxy-cwd
        cargo:rustc-link-arg=/path/to/cwd      → working directory

        cargo:rustc-link-arg=--ldproxy-linker
        cargo:rustc-link-arg=riscv32-esp-elf-gcc → recorded, not applied

    Remaining values become extra link arguments, except those starting with
    '--ldproxy', which are dropped.
    """

    def __init__(
        self,
        *,
        directive: str = LINK_ARG_DIRECTIVE,
        flag_prefix: str = FLAG_PREFIX,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._directive = directive
        self._flag_prefix = flag_prefix
        self._log = logger or get_logger("parsing.directives")

    def parse(self, path: Path) -> BuildOutputDirectives:
        """Parse a build-script output file from disk."""
        with path.open("r", encoding="utf-8") as fp:
            return self.parse_lines(fp.read().splitlines())

    def parse_lines(self, lines: Iterable[str]) -> BuildOutputDirectives:
        link_args: List[str] = []
        cwd: Optional[str] = None
        linker: Optional[str] = None
        pending: Optional[str] = None

        for raw in lines:
            line = raw.rstrip("\r\n")
            if not line.startswith(self._directive):
                continue
            arg = line[len(self._directive):]

            if pending == CWD_MARKER:
                cwd = arg
                pending = None
                self._log.info("Extracted working directory: %s", cwd)
                continue
            if pending == LINKER_MARKER:
                linker = arg
                pending = None
                self._log.debug("Ignoring linker from build output: %s", linker)
                continue

            if arg in (CWD_MARKER, LINKER_MARKER):
                pending = arg
                continue
            if arg.startswith(self._flag_prefix):
                self._log.debug("Dropping ldproxy argument from build output: %s", arg)
                continue
            link_args.append(arg)

        if pending is not None:
            self._log.debug("Marker %s has no value in build output", pending)

        return BuildOutputDirectives(link_args=link_args, cwd=cwd, linker=linker)

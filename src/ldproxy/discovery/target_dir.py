from __future__ import annotations
"""Cargo target-directory inference and build-script output discovery.

rustc passes dependency artifacts as paths such as

    /work/target/riscv32imc-esp-espidf/debug/deps/libfoo-1234.rlib

Truncating such a path at its last '/deps/' yields the profile directory
(`.../target/<triple>/<profile>`), whose `build/` subdirectory holds one
directory per build-script run.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from ldproxy.constants import (
    BUILD_SUBDIR,
    COMPANION_DIR_PREFIX,
    COMPANION_FILE,
    DEPS_MARKER,
    TARGET_MARKER,
)
from ldproxy.logging.helpers import get_logger

logger = get_logger("discovery.target")


def infer_target_dir(
    tokens: Iterable[str],
    *,
    target_marker: str = TARGET_MARKER,
    deps_marker: str = DEPS_MARKER,
) -> Optional[Path]:
    """Return the build-target directory implied by the first deps path."""
    for arg in tokens:
        if target_marker in arg and deps_marker in arg:
            logger.debug("Found potential target path: %s", arg)
            target = Path(arg[: arg.rfind(deps_marker)])
            logger.debug("Inferred target directory: %s", target)
            return target
    return None


def find_companion_dir(build_dir: Path, prefix: str = COMPANION_DIR_PREFIX) -> Optional[Path]:
    """Return the first subdirectory of *build_dir* whose name starts with *prefix*.

    Entries are visited in sorted name order and the scan stops at the first
    match, so the result does not depend on filesystem enumeration order.
    A missing or unreadable *build_dir* yields None.
    """
    try:
        entries = sorted(build_dir.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        logger.debug("Cannot list %s: %s", build_dir, exc)
        return None

    for entry in entries:
        if entry.name.startswith(prefix) and entry.is_dir():
            return entry
    return None


class BuildOutputLocator:
    """Locate the build-script `output` file below a target directory."""

    def __init__(
        self,
        *,
        build_subdir: str = BUILD_SUBDIR,
        prefix: str = COMPANION_DIR_PREFIX,
        filename: str = COMPANION_FILE,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._build_subdir = build_subdir
        self._prefix = prefix
        self._filename = filename
        self._log = logger or get_logger("discovery.output")

    def locate(self, target_dir: Path) -> Optional[Path]:
        build_dir = target_dir / self._build_subdir
        if not build_dir.is_dir():
            self._log.warning("Build directory does not exist: %s", build_dir)
            return None

        companion = find_companion_dir(build_dir, self._prefix)
        if companion is None:
            self._log.warning("No %s* directory found in %s", self._prefix, build_dir)
            return None

        output = companion / self._filename
        if not output.is_file():
            self._log.warning("Build output file does not exist: %s", output)
            return None

        return output

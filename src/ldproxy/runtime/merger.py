from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from ldproxy.core.models import MergeResult
from ldproxy.discovery.target_dir import BuildOutputLocator
from ldproxy.logging.helpers import get_logger
from ldproxy.parsing.directives import BuildOutputParser


class SideChannelMerger:
    """Merge link args and a working directory from esp-idf-sys build output.

    Every lookup failure degrades to a no-op with a warning: the link then
    proceeds with the tokens and working directory it already had.
    """

    def __init__(
        self,
        *,
        locator: Optional[BuildOutputLocator] = None,
        parser: Optional[BuildOutputParser] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger("merger")
        self._locator = locator or BuildOutputLocator(logger=self._log)
        self._parser = parser or BuildOutputParser(logger=self._log)

    def merge(self, tokens: Sequence[str], cwd: Optional[str], target_dir: Optional[Path]) -> MergeResult:
        tokens = list(tokens)
        if target_dir is None:
            return MergeResult(tokens=tokens, cwd=cwd)

        self._log.info("Reading esp-idf-sys link args from target directory: %s", target_dir)
        output = self._locator.locate(target_dir)
        if output is None:
            return MergeResult(tokens=tokens, cwd=cwd)

        self._log.debug("Reading esp-idf-sys output file: %s", output)
        try:
            directives = self._parser.parse(output)
        except (OSError, UnicodeDecodeError) as exc:
            self._log.warning("Failed to read ESP-IDF link args: %s", exc)
            return MergeResult(tokens=tokens, cwd=cwd)

        self._log.info("Extracted %d link args from esp-idf-sys output", len(directives.link_args))

        if directives.cwd is not None:
            self._log.info("Using working directory from esp-idf-sys: %s", directives.cwd)
            cwd = directives.cwd

        if directives.link_args:
            self._log.info("Applying %d ESP-IDF link args", len(directives.link_args))
            tokens.extend(directives.link_args)
        else:
            self._log.warning("No ESP-IDF link args found in output file")

        return MergeResult(tokens=tokens, cwd=cwd, source=output)

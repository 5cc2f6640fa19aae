from __future__ import annotations

"""
ResponseFileTokenizer – one-level `@file` expansion for the incoming argv.

rustc may hand the linker a single `@<link-args-file>` argument (see the
`@file` section of the GCC "Overall Options" manual) instead of a flat
argument list. This class turns such an argv into the flat token stream the
rest of the pipeline works on:

    * `@path` where `path` exists → file contents split with POSIX shell rules.
    * `@path` where `path` does not exist → kept verbatim, so a linker with its
      own `@file` syntax still receives it.
    * Anything else → kept verbatim.

Expansion is exactly one level deep: tokens read from a response file are
never rescanned for further `@` indirection.
"""

import logging
import os
import shlex
from pathlib import Path
from typing import Iterable, List, Optional

from ldproxy.core.errors import ResponseFileError
from ldproxy.logging.helpers import get_logger


class ResponseFileTokenizer:
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger("parsing.rsp")

    @staticmethod
    def split(text: str) -> List[str]:
        """Split *text* into words using Unix shell quoting and escaping rules.

        '#' is not a comment introducer here; linker arguments may contain it.
        """
        return shlex.split(text, comments=False, posix=True)

    def read(self, path: Path) -> List[str]:
        """Read and tokenize an existing response file."""
        try:
            contents = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ResponseFileError(f"cannot read response file {path}: {exc}") from exc

        self._log.debug("Contents of %s: %s", path, contents)

        try:
            return self.split(contents)
        except ValueError as exc:
            raise ResponseFileError(f"cannot tokenize response file {path}: {exc}") from exc

    def expand(self, argv: Iterable[str]) -> List[str]:
        """Return *argv* with one level of `@file` indirection expanded."""
        result: List[str] = []
        for arg in argv:
            if not arg.startswith("@"):
                result.append(arg)
                continue

            name = arg[1:]
            # A bare "@" or a name the OS rejects counts as a missing file.
            if name and os.path.exists(name):
                result.extend(self.read(Path(name)))
            else:
                result.append(arg)
        return result

from __future__ import annotations

"""Response files handed to the real linker.

The linker receives `@<path>` where `<path>` lists one argument per line,
without quoting. This is the reverse direction of
`ldproxy.parsing.tokenizer`, which reads the response files rustc gives us.
"""

import contextlib
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterator, Optional, Sequence

from ldproxy.constants import RESPONSE_FILE_TEMPLATE
from ldproxy.logging.helpers import get_logger

logger = get_logger("runtime.rsp")


def response_file_path(directory: Optional[Path] = None, *, pid: Optional[int] = None) -> Path:
    """Return the per-process response file path inside *directory*."""
    base = Path(directory) if directory is not None else Path(tempfile.gettempdir())
    return base / RESPONSE_FILE_TEMPLATE.format(pid=os.getpid() if pid is None else pid)


def write_response_file(tokens: Sequence[str], path: Path) -> Path:
    """Write *tokens* to *path* as UTF-8, one per line."""
    path.write_text("\n".join(tokens), encoding="utf-8")
    return path


@contextlib.contextmanager
def response_file_scope(
    tokens: Sequence[str],
    *,
    directory: Optional[Path] = None,
    log: Optional[logging.Logger] = None,
) -> Iterator[Optional[Path]]:
    """Write a response file for the duration of the block.

    Yields the file path, or None when the file could not be written (the
    caller then passes the arguments directly). The file is removed on exit
    whether or not the block raised.
    """
    lg = log or logger
    path = response_file_path(directory)
    try:
        write_response_file(tokens, path)
    except OSError as exc:
        lg.warning("Failed to write response file: %s, falling back to direct args", exc)
        with contextlib.suppress(OSError):
            path.unlink()
        yield None
        return

    lg.info("Wrote %d args to response file: %s", len(tokens), path)
    try:
        yield path
    finally:
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as exc:
            lg.warning("Could not remove response file %s: %s", path, exc)

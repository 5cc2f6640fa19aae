from __future__ import annotations

"""Extraction of ldproxy control flags from the linker token stream.

The extractor is a small explicit state machine over the tokens:

    * A token equal to a value flag (e.g. '--ldproxy-linker') consumes the
      following token as its value.
    * A token of the form '<value flag>=<value>' carries its value inline.
    * A token equal to a switch flag ('--ldproxy-dedup-libs', optionally
      with '=<ignored>') just sets the switch.
    * Every other token passes through, in order.

Each flag may appear any number of times; the last occurrence wins.
"""

import logging
from typing import AbstractSet, Dict, List, Optional, Sequence, Tuple

from ldproxy.constants import CWD_FLAG, DEDUP_LIBS_FLAG, LINKER_FLAG, SWITCH_FLAGS, VALUE_FLAGS
from ldproxy.core.errors import ControlFlagError
from ldproxy.core.models import ExtractedFlags
from ldproxy.logging.helpers import get_logger


class ControlFlagExtractor:
    def __init__(
        self,
        *,
        value_flags: AbstractSet[str] = VALUE_FLAGS,
        switch_flags: AbstractSet[str] = SWITCH_FLAGS,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._value_flags = frozenset(value_flags)
        self._switch_flags = frozenset(switch_flags)
        self._log = logger or get_logger("parsing.flags")

    def _match(self, tok: str) -> Tuple[Optional[str], Optional[str]]:
        """Return (flag, inline_value) when *tok* is a control flag."""
        if tok in self._value_flags or tok in self._switch_flags:
            return tok, None
        if tok.startswith("--") and "=" in tok:
            name, _, value = tok.partition("=")
            if name in self._value_flags or name in self._switch_flags:
                return name, value
        return None, None

    def scan(self, tokens: Sequence[str]) -> Tuple[List[str], Dict[str, List[str]]]:
        """Split *tokens* into passthrough tokens and per-flag value lists.

        Switch flags record an empty string per occurrence.
        """
        remaining: List[str] = []
        found: Dict[str, List[str]] = {}
        it = iter(tokens)
        for tok in it:
            flag, inline = self._match(tok)
            if flag is None:
                remaining.append(tok)
                continue

            if flag in self._switch_flags:
                found.setdefault(flag, []).append("")
                continue

            if inline is not None:
                found.setdefault(flag, []).append(inline)
                continue

            try:
                value = next(it)
            except StopIteration:
                raise ControlFlagError(flag, "expected a value") from None
            found.setdefault(flag, []).append(value)

        return remaining, found

    def extract(self, tokens: Sequence[str]) -> ExtractedFlags:
        """Remove the linker, dedup and cwd flags from *tokens*."""
        remaining, found = self.scan(tokens)
        self._log.debug("Control flags: %r", found)

        linker_values = found.get(LINKER_FLAG) or []
        cwd_values = found.get(CWD_FLAG) or []
        return ExtractedFlags(
            remaining=remaining,
            linker=linker_values[-1] if linker_values else None,
            dedup_libs=DEDUP_LIBS_FLAG in found,
            cwd=cwd_values[-1] if cwd_values else None,
        )

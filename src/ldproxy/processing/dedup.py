from __future__ import annotations

from collections import Counter
from typing import List, Sequence

from ldproxy.constants import LIB_FLAG_PREFIX


def collapse_duplicate_libs(tokens: Sequence[str], prefix: str = LIB_FLAG_PREFIX) -> List[str]:
    """Drop repeated library flags, keeping the last occurrence of each.

    Tokens are compared as exact strings, so '-lfoo' and '-l:libfoo.a' are
    distinct. Tokens not starting with *prefix* are always kept.

    >>> collapse_duplicate_libs(["-o", "out.elf", "-lm", "-lfoo", "-lm"])
    ['-o', 'out.elf', '-lfoo', '-lm']
    """
    remaining = Counter(tok for tok in tokens if tok.startswith(prefix))

    out: List[str] = []
    for tok in tokens:
        if tok in remaining:
            remaining[tok] -= 1
            if remaining[tok]:
                continue
        out.append(tok)
    return out

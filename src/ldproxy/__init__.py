from __future__ import annotations

from ldproxy.cli import main, run
from ldproxy.core.errors import LdproxyError
from ldproxy.core.models import LinkResult
from ldproxy.processing.dedup import collapse_duplicate_libs
from ldproxy.runtime.runner import LinkProxy

__version__ = '0.1.0'

__all__ = [
    'LdproxyError',
    'LinkProxy',
    'LinkResult',
    'collapse_duplicate_libs',
    'main',
    'run',
]

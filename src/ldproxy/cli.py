from __future__ import annotations

import os
import sys
from typing import Mapping, NoReturn, Optional, Sequence

from ldproxy.core.errors import LdproxyError
from ldproxy.core.models import LinkResult
from ldproxy.logging.factory import DefaultLoggerFactory
from ldproxy.runtime.runner import LinkProxy


def _configure_logging(environ: Mapping[str, str]) -> None:
    """Configure process-wide logging once from LDPROXY_LOG / LDPROXY_LOG_STYLE."""
    DefaultLoggerFactory.from_env(environ, stream=sys.stderr).get_logger('ldproxy')


def _fatal(msg: str, code: int = 1) -> NoReturn:
    """Exit the process after printing *msg* on stderr.

    Written directly rather than logged so LDPROXY_LOG=off cannot hide it.
    """
    sys.stderr.write(f'Error: {msg}\n')
    sys.stderr.flush()
    raise SystemExit(code)


def run(argv: Sequence[str], *, environ: Optional[Mapping[str, str]] = None) -> LinkResult:
    """Run one proxied link for *argv* (program name excluded)."""
    env = os.environ if environ is None else environ
    _configure_logging(env)
    return LinkProxy(environ=env).run(argv)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point used in place of the real linker."""
    try:
        run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(0)
    except KeyboardInterrupt:
        _fatal('Interrupted by user.', 130)
    except LdproxyError as exc:
        _fatal(str(exc))
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        _fatal(f'Unexpected error: {exc}')


if __name__ == '__main__':
    main()

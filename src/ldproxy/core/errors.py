from __future__ import annotations

"""Exception hierarchy shared by every pipeline stage.

Only fatal conditions are modelled here. Recoverable situations (a missing
side-channel file, a response file that cannot be written) are logged by the
stage that meets them and never raise.
"""

from typing import Optional


class LdproxyError(RuntimeError):
    """Base class for every fatal ldproxy condition."""


class ConfigurationError(LdproxyError):
    """The invocation cannot proceed with the given flags and environment."""


class ControlFlagError(ConfigurationError):
    """A control flag is malformed, e.g. a value flag without its value."""

    def __init__(self, flag: str, reason: str) -> None:
        super().__init__(f"argument '{flag}': {reason}")
        self.flag = flag


class LinkerNotFoundError(ConfigurationError):
    """No linker could be resolved by flag, environment or PATH lookup."""

    def __init__(self, flag: str) -> None:
        super().__init__(
            f"Cannot locate argument '{flag} <linker>' and no linker found in environment or PATH"
        )
        self.flag = flag


class ResponseFileError(LdproxyError):
    """An existing response file could not be read or tokenized."""


class LinkerError(LdproxyError):
    """Base class for failures of the real linker run."""


class LinkerSpawnError(LinkerError):
    """The linker process could not be started."""


class LinkerOutputError(LinkerError):
    """The linker output could not be decoded as text."""


class LinkerFailedError(LinkerError):
    """The linker exited unsuccessfully."""

    def __init__(self, linker: str, status: str, stderr: str, *, returncode: Optional[int] = None) -> None:
        super().__init__(f"Linker {linker} failed: {status}\nSTDERR OUTPUT:\n{stderr}")
        self.linker = linker
        self.status = status
        self.stderr = stderr
        self.returncode = returncode


class ForcedFailureError(LinkerError):
    """Failure injected through LDPROXY_LINK_FAIL after a successful link."""

    def __init__(self) -> None:
        super().__init__('Failure requested')


__all__ = [
    'LdproxyError',
    'ConfigurationError',
    'ControlFlagError',
    'LinkerNotFoundError',
    'ResponseFileError',
    'LinkerError',
    'LinkerSpawnError',
    'LinkerOutputError',
    'LinkerFailedError',
    'ForcedFailureError',
]

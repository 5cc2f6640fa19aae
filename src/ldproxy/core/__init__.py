"""Core contracts of ldproxy: models, errors and Protocols."""

from ldproxy.core.errors import (
    ConfigurationError,
    ControlFlagError,
    ForcedFailureError,
    LdproxyError,
    LinkerError,
    LinkerFailedError,
    LinkerNotFoundError,
    LinkerOutputError,
    LinkerSpawnError,
    ResponseFileError,
)
from ldproxy.core.models import (
    BuildOutputDirectives,
    ExtractedFlags,
    LinkResult,
    MergeResult,
    ProcessOutput,
)

__all__ = [
    "ConfigurationError",
    "ControlFlagError",
    "ForcedFailureError",
    "LdproxyError",
    "LinkerError",
    "LinkerFailedError",
    "LinkerNotFoundError",
    "LinkerOutputError",
    "LinkerSpawnError",
    "ResponseFileError",
    "BuildOutputDirectives",
    "ExtractedFlags",
    "LinkResult",
    "MergeResult",
    "ProcessOutput",
]

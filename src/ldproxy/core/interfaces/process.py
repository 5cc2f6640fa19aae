from __future__ import annotations
from typing import Optional, Protocol, Sequence, runtime_checkable

from ldproxy.core.models import LinkResult, ProcessOutput


@runtime_checkable
class ProcessRunnerProtocol(Protocol):
    """Runs a child process to completion and captures its output."""

    def run(self, cmd: Sequence[str], *, cwd: Optional[str] = None) -> ProcessOutput:
        ...


@runtime_checkable
class LinkerInvokerProtocol(Protocol):
    def invoke(self, linker: str, args: Sequence[str], *, cwd: Optional[str] = None) -> LinkResult:
        ...

from __future__ import annotations

import logging
import os
import signal
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from ldproxy.constants import LINK_FAIL_ENV_VAR, RESPONSE_FILE_THRESHOLD
from ldproxy.core.errors import (
    ForcedFailureError,
    LinkerFailedError,
    LinkerOutputError,
    LinkerSpawnError,
)
from ldproxy.core.interfaces.process import LinkerInvokerProtocol, ProcessRunnerProtocol
from ldproxy.core.models import LinkResult, ProcessOutput
from ldproxy.logging.helpers import get_logger
from ldproxy.runtime.process import SubprocessRunner
from ldproxy.runtime.response_file import response_file_scope


def describe_status(returncode: int) -> str:
    """Human readable exit status: 'exit status: 1' or 'signal: 9 (SIGKILL)'."""
    if returncode >= 0:
        return f"exit status: {returncode}"
    signum = -returncode
    try:
        return f"signal: {signum} ({signal.Signals(signum).name})"
    except ValueError:
        return f"signal: {signum}"


def _decode(data: bytes, stream: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise LinkerOutputError(f"linker {stream} is not valid UTF-8: {exc}") from exc


class LinkerInvoker(LinkerInvokerProtocol):
    """Run the real linker, through a response file when argv gets long."""

    def __init__(
        self,
        *,
        runner: Optional[ProcessRunnerProtocol] = None,
        environ: Optional[Mapping[str, str]] = None,
        threshold: int = RESPONSE_FILE_THRESHOLD,
        rsp_dir: Optional[Path] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._runner = runner or SubprocessRunner()
        self._environ = os.environ if environ is None else environ
        self._threshold = int(threshold)
        self._rsp_dir = rsp_dir
        self._log = logger or get_logger("invoker")

    def wants_response_file(self, args: Sequence[str]) -> bool:
        return len(args) > self._threshold

    def _log_command(self, linker: str, args: Sequence[str]) -> None:
        if len(args) < 50:
            self._log.debug("Full linker command: %s %s", linker, " ".join(args))
        else:
            self._log.debug("First 10 args: %s", " ".join(args[:10]))
            self._log.debug("Last 10 args: %s", " ".join(args[-10:]))

    def _spawn(self, cmd: List[str], cwd: Optional[str]) -> ProcessOutput:
        self._log.debug("Calling actual linker: %r", cmd)
        try:
            return self._runner.run(cmd, cwd=cwd)
        except OSError as exc:
            raise LinkerSpawnError(f"cannot run linker {cmd[0]}: {exc}") from exc

    def invoke(self, linker: str, args: Sequence[str], *, cwd: Optional[str] = None) -> LinkResult:
        args = list(args)
        if cwd:
            self._log.info("Linker working directory: %s", cwd)
        self._log.info("Linker command: %s (with %d args)", linker, len(args))
        self._log_command(linker, args)

        rsp_path: Optional[Path] = None
        if self.wants_response_file(args):
            self._log.info("Using response file due to %d args", len(args))
            with response_file_scope(args, directory=self._rsp_dir, log=self._log) as rsp_path:
                cmd = [linker, f"@{rsp_path}"] if rsp_path is not None else [linker, *args]
                out = self._spawn(cmd, cwd)
        else:
            out = self._spawn([linker, *args], cwd)

        stdout = _decode(out.stdout, "stdout")
        stderr = _decode(out.stderr, "stderr")

        self._log.debug("==============Linker stdout:\n%s\n==============", stdout)
        self._log.debug("==============Linker stderr:\n%s\n==============", stderr)

        if out.returncode != 0:
            raise LinkerFailedError(linker, describe_status(out.returncode), stderr, returncode=out.returncode)

        if LINK_FAIL_ENV_VAR in self._environ:
            raise ForcedFailureError()

        return LinkResult(
            linker=linker,
            args=args,
            cwd=cwd,
            returncode=out.returncode,
            stdout=stdout,
            stderr=stderr,
            response_file=rsp_path,
        )

from __future__ import annotations

import subprocess
from typing import Optional, Sequence

from ldproxy.core.interfaces.process import ProcessRunnerProtocol
from ldproxy.core.models import ProcessOutput


class SubprocessRunner(ProcessRunnerProtocol):
    """Default runner: blocking `subprocess.run` with captured output."""

    def run(self, cmd: Sequence[str], *, cwd: Optional[str] = None) -> ProcessOutput:
        proc = subprocess.run(
            list(cmd),
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
        return ProcessOutput(returncode=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)

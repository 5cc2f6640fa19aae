from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class ExtractedFlags:
    """Token stream with ldproxy control flags removed, plus their values."""
    remaining: List[str]
    linker: Optional[str] = None
    dedup_libs: bool = False
    cwd: Optional[str] = None


@dataclass(frozen=True)
class BuildOutputDirectives:
    """Directives recovered from a build-script `output` file."""
    link_args: List[str] = field(default_factory=list)
    cwd: Optional[str] = None
    linker: Optional[str] = None


@dataclass(frozen=True)
class MergeResult:
    tokens: List[str]
    cwd: Optional[str]
    source: Optional[Path] = None


@dataclass(frozen=True)
class ProcessOutput:
    """Raw outcome of a finished child process."""
    returncode: int
    stdout: bytes
    stderr: bytes


@dataclass(frozen=True)
class LinkResult:
    linker: str
    args: List[str]
    cwd: Optional[str]
    returncode: int
    stdout: str
    stderr: str
    response_file: Optional[Path] = None

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Sequence

from ldproxy.core.interfaces.process import LinkerInvokerProtocol
from ldproxy.core.models import LinkResult
from ldproxy.discovery.linker_lookup import LinkerResolver
from ldproxy.discovery.target_dir import infer_target_dir
from ldproxy.logging.helpers import get_logger
from ldproxy.parsing.flags import ControlFlagExtractor
from ldproxy.parsing.tokenizer import ResponseFileTokenizer
from ldproxy.processing.dedup import collapse_duplicate_libs
from ldproxy.runtime.invoker import LinkerInvoker
from ldproxy.runtime.merger import SideChannelMerger


class LinkProxy:
    """One linker invocation: ingest → extract → merge → dedup → invoke.

    Every collaborator can be injected; defaults read the real environment
    and spawn the real linker.
    """

    def __init__(
        self,
        *,
        environ: Optional[Mapping[str, str]] = None,
        tokenizer: Optional[ResponseFileTokenizer] = None,
        extractor: Optional[ControlFlagExtractor] = None,
        resolver: Optional[LinkerResolver] = None,
        merger: Optional[SideChannelMerger] = None,
        invoker: Optional[LinkerInvokerProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        env = os.environ if environ is None else environ
        self._log = logger or get_logger("runner")
        self._tokenizer = tokenizer or ResponseFileTokenizer()
        self._extractor = extractor or ControlFlagExtractor()
        self._resolver = resolver or LinkerResolver(environ=env)
        self._merger = merger or SideChannelMerger()
        self._invoker = invoker or LinkerInvoker(environ=env)

    def run(self, argv: Sequence[str]) -> LinkResult:
        self._log.info("Running ldproxy")
        self._log.debug("Raw link arguments: %r", list(argv))

        tokens = self._tokenizer.expand(argv)
        self._log.debug("Link arguments: %r", tokens)

        flags = self._extractor.extract(tokens)
        linker = self._resolver.resolve(flags.linker)
        self._log.debug("Actual linker executable: %s", linker)

        self._log.debug("Searching for target directory in %d arguments", len(flags.remaining))
        target_dir = infer_target_dir(flags.remaining)
        merged = self._merger.merge(flags.remaining, flags.cwd, target_dir)

        args = merged.tokens
        if flags.dedup_libs:
            self._log.debug("Duplicate libs removal requested")
            args = collapse_duplicate_libs(args)

        return self._invoker.invoke(linker, args, cwd=merged.cwd)

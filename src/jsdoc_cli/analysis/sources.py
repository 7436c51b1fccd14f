from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import aiofiles

from jsdoc_cli.analysis.doc_matcher import DocumentationMatcher
from jsdoc_cli.analysis.model import SourceModule
from jsdoc_cli.exceptions import NotAFileError, SourceFileNotFoundError
from jsdoc_cli.ingest.registry import provider_for_path

logger = logging.getLogger(__name__)


def check_source_file(path: Path) -> None:
    if not path.exists():
        raise SourceFileNotFoundError(path)
    if not path.is_file():
        raise NotAFileError(path)


async def read_source_module(path: Path) -> SourceModule:
    check_source_file(path)
    provider = provider_for_path(path)
    async with aiofiles.open(path, "r", encoding="utf-8") as f:
        text = await f.read()
    logger.debug("Parsing %s with the %s provider", path, provider.language_id)
    return SourceModule(path=path, text=text, parsed=provider.parse_module(text, path=path))


class SourceCache:
    """Per-run cache: each file is read and parsed at most once.

    Concurrent requests for the same path share one task, so a file that is
    reached through several re-export chains is still loaded a single time.
    """

    def __init__(self) -> None:
        self._tasks: dict[Path, asyncio.Task[SourceModule]] = {}
        self._matchers: dict[Path, DocumentationMatcher] = {}

    async def load(self, path: Path) -> SourceModule:
        task = self._tasks.get(path)
        if task is None:
            task = asyncio.ensure_future(read_source_module(path))
            self._tasks[path] = task
        return await task

    async def matcher(self, path: Path) -> DocumentationMatcher:
        module = await self.load(path)
        matcher = self._matchers.get(path)
        if matcher is None:
            matcher = DocumentationMatcher(module.parsed.comments)
            self._matchers[path] = matcher
        return matcher

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Any

from watchfiles import awatch

from portfolio.core.posts import is_post_file

logger = logging.getLogger(__name__)

OnChange = Callable[[set[Path]], Coroutine[Any, Any, None]]


class WatchfilesWatcher:
    """Watch the top level of a posts directory and report changed post files.

    Implements the ``FileWatcherPort`` protocol. Changes to anything that is not
    a ``.md``/``.mdx`` file are ignored.
    """

    def __init__(self, directory: str | Path, on_change: OnChange, debounce_ms: int = 400) -> None:
        self._directory = Path(directory)
        self._on_change = on_change
        self._debounce_ms = debounce_ms
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None

    async def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._watch())
        logger.info("Watching %s for post changes", self._directory)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Stopped watching %s", self._directory)

    async def _watch(self) -> None:
        async for changes in awatch(self._directory, debounce=self._debounce_ms, recursive=False):
            changed = {Path(p) for _, p in changes}
            posts = {p for p in changed if is_post_file(p)}
            if not posts:
                logger.debug("Ignoring %d non-post change(s)", len(changed))
                continue
            logger.info("Detected changes in %d post(s)", len(posts))
            try:
                await self._on_change(posts)
            except Exception:
                logger.exception("Post change callback failed")

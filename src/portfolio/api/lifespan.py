from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from portfolio.api.dependencies import get_content_store, reset_store
from portfolio.config import watch_enabled
from portfolio.core.errors import ContentError
from portfolio.watcher.watchfiles_adapter import WatchfilesWatcher

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    watcher: WatchfilesWatcher | None = None
    if watch_enabled():
        store = get_content_store()

        async def _reload(paths: set[Path]) -> None:
            try:
                await asyncio.to_thread(store.reload)
            except ContentError as exc:
                logger.error("Keeping previous content after failed reload: %s", exc)

        watcher = WatchfilesWatcher(store.content_dir, _reload)
        await watcher.start()
    try:
        yield
    finally:
        if watcher is not None:
            await watcher.stop()
        reset_store()

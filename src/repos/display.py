# src/repos/display.py

import asyncio
from typing import Any, Dict, List

from core.logging.logger import get_logger
from repos.archive import RepoArchive
from repos.fetcher import RepoFetcher
from repos.models import RepoItemView, RepoRecord
from repos.store import RepoListStore


class RepoDisplay:
    """
    One item per stored identifier, in store order (newest first).
    """

    def __init__(self, store: RepoListStore, fetcher: RepoFetcher):
        self.store = store
        self.fetcher = fetcher

    async def render(self, wait: bool = False) -> List[RepoItemView]:
        identifiers = self.store.repos
        tasks = {self.fetcher.ensure(identifier) for identifier in identifiers}

        if wait and tasks:
            await asyncio.wait(tasks)

        return [self.fetcher.state(identifier) for identifier in identifiers]


class ArchiveFeed:
    """
    Archive-backed record list, newest first.

    The archive is read once (hydrate); records fetched afterwards are put
    at the head. A repository archived earlier and fetched again shows up twice.
    Records fetched before the read finishes are already in the file, so
    pushes are ignored until then.
    """

    def __init__(self, archive: RepoArchive, fetcher: RepoFetcher):
        self.archive = archive
        self.logger = get_logger(__name__)
        self._records: List[Dict[str, Any]] = []
        self._hydrated = False
        self._hydrate_lock = asyncio.Lock()
        fetcher.subscribe(self.push)

    @property
    def hydrated(self) -> bool:
        return self._hydrated

    async def hydrate(self) -> None:
        async with self._hydrate_lock:
            if self._hydrated:
                return
            stored = await self.archive.read_newest_first()
            self._records = stored
            self._hydrated = True
        self.logger.info(f"Loaded {len(stored)} archived records")

    def push(self, record: RepoRecord) -> None:
        if not self._hydrated:
            return
        self._records.insert(0, record.model_dump())

    @property
    def records(self) -> List[Dict[str, Any]]:
        return list(self._records)

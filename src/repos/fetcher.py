# src/repos/fetcher.py

import asyncio
from typing import Callable, Dict, List

from pydantic import ValidationError

from core.logging.logger import get_logger
from repos.archive import RepoArchive
from repos.client import GitHubClient
from repos.errors import ArchiveWriteError, RepoFetchError
from repos.models import RepoItemView, RepoRecord

RecordListener = Callable[[RepoRecord], None]


class RepoFetcher:
    """
    Repository lookup use-case, keyed by identifier.

    1) one upstream call per identifier (in-flight and finished tasks are reused)
    2) validate the payload
    3) append the raw payload to the archive
    4) notify listeners
    """

    def __init__(self, client: GitHubClient, archive: RepoArchive):
        self.client = client
        self.archive = archive
        self.logger = get_logger(__name__)
        self._tasks: Dict[str, asyncio.Task] = {}
        self._listeners: List[RecordListener] = []

    def subscribe(self, listener: RecordListener) -> None:
        self._listeners.append(listener)

    def ensure(self, identifier: str) -> asyncio.Task:
        """
        Task for this identifier, started on first request.
        """
        task = self._tasks.get(identifier)
        if task is None:
            task = asyncio.create_task(self._load(identifier), name=f"fetch:{identifier}")
            self._tasks[identifier] = task
        return task

    async def fetch(self, identifier: str) -> RepoRecord:
        # shield: a cancelled caller must not cancel the shared task
        return await asyncio.shield(self.ensure(identifier))

    def state(self, identifier: str) -> RepoItemView:
        task = self._tasks.get(identifier)
        if task is None or not task.done():
            return RepoItemView(identifier=identifier, status="loading")
        if task.cancelled():
            return RepoItemView(identifier=identifier, status="error", error="Fetch cancelled")

        error = task.exception()
        if error is not None:
            return RepoItemView(identifier=identifier, status="error", error=str(error))
        return RepoItemView(identifier=identifier, status="success", record=task.result())

    def forget_failure(self, identifier: str) -> bool:
        """
        Drop a failed result so the identifier can be fetched again.
        Successful and in-flight results are kept.
        """
        task = self._tasks.get(identifier)
        if task is None or not task.done():
            return False
        if task.cancelled() or task.exception() is not None:
            del self._tasks[identifier]
            return True
        return False

    async def _load(self, identifier: str) -> RepoRecord:
        self.logger.info(f"Fetching repository {identifier}")

        try:
            payload = await asyncio.to_thread(self.client.get_repo_data, identifier)
        except RepoFetchError:
            self.logger.warning(f"Fetch failed for {identifier}")
            raise

        try:
            record = RepoRecord.model_validate(payload)
        except ValidationError as e:
            self.logger.warning(f"Malformed payload for {identifier}: {e.error_count()} errors")
            raise RepoFetchError(identifier, "malformed payload") from e

        try:
            await self.archive.append(payload)
        except ArchiveWriteError as e:
            # the fetch itself succeeded; the item still renders
            self.logger.error(f"Failed to save data for {identifier}: {e}")

        for listener in self._listeners:
            listener(record)

        return record

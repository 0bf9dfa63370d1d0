# src/repos/archive.py

import asyncio
import json
from pathlib import Path
from typing import Any, List, Optional, Union

from core.logging.logger import get_logger
from repos.errors import ArchiveFormatError, ArchiveReadError, ArchiveWriteError


class RepoArchive:
    """
    Append-only JSON array of fetched records, oldest first on disk.

    Every append reads the whole file, appends one element and rewrites it.
    Without serialize_writes two concurrent appends can read the same base
    and one of the records is lost. A file holding JSON other than an array
    is never rewritten.
    """

    def __init__(self, path: Union[str, Path], serialize_writes: bool = False):
        self.path = Path(path)
        self.logger = get_logger(__name__)
        self._lock: Optional[asyncio.Lock] = asyncio.Lock() if serialize_writes else None

    def exists(self) -> bool:
        return self.path.is_file()

    def _load(self) -> List[Any]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as e:
            raise ArchiveReadError(f"Cannot read {self.path}: {e}") from e

        try:
            data = json.loads(text)
        except ValueError as e:
            raise ArchiveReadError(f"Cannot parse {self.path}: {e}") from e

        if not isinstance(data, list):
            raise ArchiveFormatError(f"{self.path} does not hold a JSON array")
        return data

    async def read(self) -> List[Any]:
        """
        Current archive contents. A missing or broken file reads as empty.
        """
        try:
            return await asyncio.to_thread(self._load)
        except ArchiveReadError as e:
            self.logger.warning(f"{e}; treating archive as empty")
            return []

    async def read_newest_first(self) -> List[Any]:
        records = await self.read()
        records.reverse()
        return records

    def _write(self, payload: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(payload, encoding="utf-8")

    async def append(self, record: Any) -> int:
        """
        Append one record and return the new archive length.
        """
        if self._lock is None:
            return await self._append(record)
        async with self._lock:
            return await self._append(record)

    async def _append(self, record: Any) -> int:
        try:
            records = await asyncio.to_thread(self._load)
        except ArchiveFormatError as e:
            # not ours to overwrite
            raise ArchiveWriteError(f"Refusing to append: {e}") from e
        except ArchiveReadError as e:
            self.logger.warning(f"{e}; treating archive as empty")
            records = []

        records.append(record)

        try:
            payload = json.dumps(records, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise ArchiveWriteError(f"Cannot serialize archive: {e}") from e

        try:
            await asyncio.to_thread(self._write, payload)
        except OSError as e:
            raise ArchiveWriteError(f"Cannot write {self.path}: {e}") from e

        self.logger.info(f"Archived record #{len(records)} to {self.path}")
        return len(records)

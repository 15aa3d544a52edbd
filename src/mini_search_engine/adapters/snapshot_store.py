"""Filesystem-backed JSON snapshot of the full article list."""

from __future__ import annotations

from collections.abc import Sequence
import json
import logging
from pathlib import Path
import shutil

import anyio
from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from mini_search_engine.domain.exceptions import PersistenceError
from mini_search_engine.domain.model import Article


logger = logging.getLogger(__name__)

_ARTICLE_LIST = TypeAdapter(list[Article])


class JsonSnapshotStore:
    """Persist articles as one pretty-printed JSON array.

    Writes go to a temporary sibling file that is then moved over the
    snapshot, and are serialized so a later snapshot never lands before an
    earlier one.
    """

    def __init__(self, path: Path):
        self.path = path
        self._write_lock = anyio.Lock()

    @staticmethod
    def serialize(articles: Sequence[Article]) -> str:
        return json.dumps([article.to_dict() for article in articles], indent=2, ensure_ascii=False)

    async def save(self, articles: Sequence[Article]) -> None:
        """Write the full snapshot; raises PersistenceError on I/O failure."""
        payload = self.serialize(articles)
        async with self._write_lock:
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            try:
                await anyio.Path(self.path.parent).mkdir(parents=True, exist_ok=True)
                async with await anyio.open_file(tmp_path, "w", encoding="utf-8") as fp:
                    await fp.write(payload)
                await anyio.to_thread.run_sync(shutil.move, str(tmp_path), str(self.path))
            except OSError as err:
                raise PersistenceError(f"Failed to write snapshot {self.path}: {err}", self.path) from err
        logger.debug("Wrote snapshot of %d articles to %s", len(articles), self.path)

    async def load(self) -> list[Article] | None:
        """Read the snapshot.

        Returns None when no snapshot exists; raises PersistenceError when the
        file cannot be read or decoded.
        """
        try:
            async with await anyio.open_file(self.path, "r", encoding="utf-8") as fp:
                content = await fp.read()
        except FileNotFoundError:
            return None
        except OSError as err:
            raise PersistenceError(f"Failed to read snapshot {self.path}: {err}", self.path) from err

        try:
            return _ARTICLE_LIST.validate_python(json.loads(content))
        except (json.JSONDecodeError, PydanticValidationError) as err:
            raise PersistenceError(f"Snapshot {self.path} is not a valid article list: {err}", self.path) from err

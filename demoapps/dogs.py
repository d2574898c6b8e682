"""SQLite store of saved dog picture URLs."""

from __future__ import annotations

import contextlib
import os
import sqlite3
from types import TracebackType

DEFAULT_DATABASE = os.path.join("hotdogdb", "hotdog.db")
LIST_LIMIT = 10

_SCHEMA = """
CREATE TABLE IF NOT EXISTS dogs (
    id INTEGER PRIMARY KEY,
    url TEXT NOT NULL
);
"""


class DogStore:
    """Saved dog images, newest first."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_DATABASE) -> None:
        self._conn = sqlite3.connect(os.fspath(path))
        self._conn.executescript(_SCHEMA)

    def list_dogs(self) -> list[tuple[int, str]]:
        """The ten most recently saved dogs as ``(id, url)`` pairs."""
        rows = self._conn.execute(
            "SELECT id, url FROM dogs ORDER BY id DESC LIMIT ?", (LIST_LIMIT,)
        )
        return [(dog_id, url) for dog_id, url in rows]

    def remove_dog(self, dog_id: int) -> None:
        with self._conn:
            self._conn.execute("DELETE FROM dogs WHERE id = ?", (dog_id,))

    def save_dog(self, image: str) -> None:
        """Store an image URL; a failed insert is silently dropped."""
        with contextlib.suppress(sqlite3.Error), self._conn:
            self._conn.execute("INSERT INTO dogs (url) VALUES (?)", (image,))

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> DogStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
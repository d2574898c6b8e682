"""Directory browser state: the current directory, its entries and the last error."""

from __future__ import annotations

import os
from pathlib import Path


class FileExplorer:
    """Browse the file system one directory at a time.

    The listing is kept in the order the operating system returns it.
    Failures are recorded in ``err`` instead of being raised, so a viewer
    can show them next to the previous listing.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        start = os.getcwd() if path is None else os.fspath(path)
        self.current_path = Path(os.path.abspath(start))
        self.path_names: list[Path] = []
        self.err: str | None = None
        self.reload_path_list()

    def reload_path_list(self) -> None:
        """Read the entries of the current directory, or record why it failed."""
        try:
            with os.scandir(self.current_path) as entries:
                collected = [Path(entry.path) for entry in entries]
        except OSError as exc:
            self.err = f"An error occurred: {exc!r}"
            return
        self.clear_err()
        self.path_names = collected

    def go_up(self) -> None:
        """Move to the parent directory; at the root, record an error instead."""
        parent = self.current_path.parent
        if parent == self.current_path:
            self.err = "Cannot go up from the root directory"
            return
        self.current_path = parent
        self.reload_path_list()

    def enter_dir(self, dir_id: int) -> None:
        """Move into the entry at position ``dir_id`` of the current listing."""
        if dir_id < 0:
            raise IndexError(f"entry index out of range: {dir_id}")
        self.current_path = self.path_names[dir_id]
        self.reload_path_list()

    def current(self) -> str:
        return str(self.current_path)

    def clear_err(self) -> None:
        self.err = None
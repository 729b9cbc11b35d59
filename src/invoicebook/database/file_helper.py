"""Line-oriented access to a single text file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)


class FileHelper:
    """Owns one UTF-8 file and reads/writes it as newline-terminated lines.

    Bytes that are not valid UTF-8 are read and written back unchanged
    through ``surrogateescape``. Methods do no locking and let ``OSError``
    propagate; the database that owns the helper serializes access and
    wraps failures.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def create(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.touch(exist_ok=True)
        log.debug("Created %s", self._path)

    def delete(self) -> None:
        if self._path.is_file():
            self._path.unlink()

    def is_empty(self) -> bool:
        if not self._path.is_file():
            return True
        return self._path.stat().st_size == 0

    def clear(self) -> None:
        """Truncate to zero length, creating the file if needed."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8"):
            pass

    def read_lines(self) -> list[str]:
        """Return every line without its terminator; missing file is empty."""
        if not self._path.is_file():
            return []
        with self._path.open("r", encoding="utf-8", errors="surrogateescape") as f:
            return [line.rstrip("\r\n") for line in f]

    def read_last_line(self) -> str | None:
        lines = self.read_lines()
        return lines[-1] if lines else None

    def append_line(self, line: str) -> None:
        if not self._path.is_file():
            self.create()
        with self._path.open("a", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
            f.write(line)
            f.write("\n")
            f.flush()

    def write_lines(self, lines: list[str]) -> None:
        """Replace the whole file with ``lines``.

        Written to a sibling temp file first and moved over the target with
        ``os.replace`` so readers never observe a half-written line.
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            with tmp_path.open("w", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
                for line in lines:
                    f.write(line)
                    f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()

"""Source archive reader backed by zipfile."""

import zipfile
from collections.abc import Callable
from pathlib import Path
from typing import IO

from zipbatch.domain.entities import Entry
from zipbatch.domain.exceptions import InvalidArchive


class ZipArchiveReader:
    """Lists file members of a ZIP archive and opens them for reading."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._zip: zipfile.ZipFile | None = None

    def __enter__(self) -> "ZipArchiveReader":
        try:
            self._zip = zipfile.ZipFile(self._path)
        except zipfile.BadZipFile as e:
            raise InvalidArchive(f"Invalid or corrupted ZIP file: {self._path}") from e
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._zip is not None:
            self._zip.close()
            self._zip = None

    @property
    def _archive(self) -> zipfile.ZipFile:
        if self._zip is None:
            raise RuntimeError("ZipArchiveReader used outside of a with block")
        return self._zip

    def entries(self, predicate: Callable[[Entry], bool] | None = None) -> list[Entry]:
        """File members in archive order, directories skipped."""
        items = [
            Entry(name=info.filename, size=info.file_size)
            for info in self._archive.infolist()
            if not info.is_dir()
        ]
        if predicate is None:
            return items
        return [e for e in items if predicate(e)]

    def open(self, entry: Entry) -> IO[bytes]:
        """Binary stream of the member's uncompressed content."""
        return self._archive.open(entry.name)

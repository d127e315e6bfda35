"""Archive writer port - write one batch to one archive file."""

from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from zipbatch.application.ports.archive_reader import ArchiveReader
from zipbatch.domain.entities import Batch, Entry


class ArchiveWriter(Protocol):
    """Port for writing a batch's entries into a new archive."""

    def write(
        self,
        batch: Batch,
        reader: ArchiveReader,
        destination: Path,
        arcname: Callable[[Entry], str] | None = None,
    ) -> Path: ...

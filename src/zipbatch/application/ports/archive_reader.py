"""Archive reader port - source archive access."""

from collections.abc import Callable
from typing import IO, Protocol

from zipbatch.domain.entities import Entry


class ArchiveReader(Protocol):
    """Port for listing and reading members of a source archive. Used as a context manager."""

    def __enter__(self) -> "ArchiveReader": ...

    def __exit__(self, *exc_info: object) -> None: ...

    def entries(self, predicate: Callable[[Entry], bool] | None = None) -> list[Entry]: ...

    def open(self, entry: Entry) -> IO[bytes]: ...

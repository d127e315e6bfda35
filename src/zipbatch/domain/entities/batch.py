"""Batch entity - bounded group of entries for one output archive."""

from dataclasses import dataclass

from zipbatch.domain.entities.entry import Entry


@dataclass(frozen=True)
class Batch:
    """Finalized batch: 1-based index plus its entries in source order."""

    index: int
    entries: tuple[Entry, ...]

    @property
    def count(self) -> int:
        return len(self.entries)

    @property
    def byte_total(self) -> int:
        return sum(e.size for e in self.entries)

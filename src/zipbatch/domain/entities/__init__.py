"""Domain entities."""

from zipbatch.domain.entities.batch import Batch
from zipbatch.domain.entities.entry import Entry

__all__ = [
    "Batch",
    "Entry",
]

"""Packer port - partition entries into bounded batches."""

from collections.abc import Iterable
from typing import Protocol

from zipbatch.domain.entities import Batch, Entry
from zipbatch.domain.value_objects import BatchLimits


class Packer(Protocol):
    """Port for grouping entries into batches under limits."""

    def pack(self, entries: Iterable[Entry], limits: BatchLimits) -> tuple[Batch, ...]: ...

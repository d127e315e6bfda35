"""Greedy batch packer."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import reduce

from zipbatch.domain.entities import Batch, Entry
from zipbatch.domain.value_objects import BatchLimits


@dataclass
class _Accumulator:
    """Fold state: closed batches plus the batch being filled."""

    closed: list[tuple[Entry, ...]] = field(default_factory=list)
    current: list[Entry] = field(default_factory=list)
    current_size: int = 0

    def close_current(self) -> None:
        if self.current:
            self.closed.append(tuple(self.current))
        self.current = []
        self.current_size = 0


class GreedyPacker:
    """Packer filling each batch in source order until the next entry would not fit."""

    def pack(self, entries: Iterable[Entry], limits: BatchLimits) -> tuple[Batch, ...]:
        """
        Partition entries into batches in a single forward pass.

        A batch is closed when adding the next entry would exceed
        ``limits.max_entries`` or ``limits.max_bytes``. The size check only
        applies to non-empty batches, so an entry larger than ``max_bytes``
        ends up alone in its own batch.
        """

        def step(acc: _Accumulator, entry: Entry) -> _Accumulator:
            if acc.current and (
                len(acc.current) + 1 > limits.max_entries
                or acc.current_size + entry.size > limits.max_bytes
            ):
                acc.close_current()
            acc.current.append(entry)
            acc.current_size += entry.size
            return acc

        final = reduce(step, entries, _Accumulator())
        final.close_current()
        return tuple(
            Batch(index=i, entries=group) for i, group in enumerate(final.closed, start=1)
        )

"""Batch limits - maximum entry count and approximate byte size."""

from dataclasses import dataclass

BYTES_PER_MEGABYTE = 1024 * 1024


@dataclass(frozen=True)
class BatchLimits:
    """Upper bounds for one batch. Both must be positive."""

    max_entries: int
    max_bytes: int

    def __post_init__(self) -> None:
        if self.max_entries <= 0:
            raise ValueError("max_entries must be greater than 0")
        if self.max_bytes <= 0:
            raise ValueError("max_bytes must be greater than 0")

    @classmethod
    def from_megabytes(cls, max_entries: int, approx_size_mb: float) -> "BatchLimits":
        """Build limits from a size in megabytes (fractions allowed)."""
        if approx_size_mb <= 0:
            raise ValueError("approx_size_mb must be greater than 0")
        return cls(
            max_entries=max_entries,
            max_bytes=max(1, int(approx_size_mb * BYTES_PER_MEGABYTE)),
        )

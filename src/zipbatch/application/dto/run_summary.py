"""Run summary DTOs."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class DivideSummary:
    """Totals for a divide run."""

    total_entries: int
    archives: list[Path] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def archives_created(self) -> int:
        return len(self.archives)


@dataclass
class SplitSummary:
    """Totals for a split-and-upload run."""

    total_entries: int
    successful_uploads: int = 0
    failed_uploads: int = 0
    failures: list[tuple[str, str]] = field(default_factory=list)  # (filename, error)
    elapsed_seconds: float = 0.0

    @property
    def batches(self) -> int:
        return self.successful_uploads + self.failed_uploads

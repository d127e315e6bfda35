"""Entry entity - one file record inside a source archive."""

from dataclasses import dataclass
from pathlib import PurePosixPath


@dataclass(frozen=True)
class Entry:
    """File member of a source archive: name and uncompressed size."""

    name: str
    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"Entry size must be non-negative: {self.name}")

    @property
    def basename(self) -> str:
        return PurePosixPath(self.name).name

    @property
    def is_xml(self) -> bool:
        return self.name.lower().endswith(".xml")

"""Write one batch into a new ZIP archive."""

import shutil
import time
import zipfile
from collections.abc import Callable
from pathlib import Path

from zipbatch.application.ports.archive_reader import ArchiveReader
from zipbatch.domain.entities import Batch, Entry

_COPY_BUFFER = 1024 * 1024


class ZipArchiveWriter:
    """Streams batch members from a source reader into a deflated ZIP file."""

    def __init__(self, compression: int = zipfile.ZIP_DEFLATED) -> None:
        self._compression = compression

    def write(
        self,
        batch: Batch,
        reader: ArchiveReader,
        destination: Path,
        arcname: Callable[[Entry], str] | None = None,
    ) -> Path:
        """Write batch entries to destination. Member names default to entry names."""
        date_time = time.localtime()[:6]
        with zipfile.ZipFile(destination, "w", compression=self._compression) as zf:
            for entry in batch.entries:
                info = zipfile.ZipInfo(arcname(entry) if arcname else entry.name, date_time)
                info.compress_type = self._compression
                # declared size lets zipfile pick zip64 headers for large members
                info.file_size = entry.size
                with reader.open(entry) as src, zf.open(info, "w") as dst:
                    shutil.copyfileobj(src, dst, _COPY_BUFFER)
        return destination

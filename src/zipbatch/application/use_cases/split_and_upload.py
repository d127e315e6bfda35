"""Split archive and upload batches use case."""

import logging
import time
from collections import Counter
from collections.abc import Callable
from contextlib import AbstractContextManager
from pathlib import Path

from zipbatch.application.dto.run_summary import SplitSummary
from zipbatch.application.ports import ArchiveReader, ArchiveWriter, Packer, Uploader
from zipbatch.domain.entities import Batch, Entry
from zipbatch.domain.value_objects import BatchLimits

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 50


def batch_filename(batch: Batch) -> str:
    return f"batch_{batch.index:03d}.zip"


def duplicate_basenames(batch: Batch) -> list[str]:
    """Base names shared by more than one entry of the batch, in first-seen order."""
    counts = Counter(e.basename for e in batch.entries)
    return [name for name, n in counts.items() if n > 1]


def format_size(size: int) -> str:
    if size < 1024:
        return f"{size} bytes"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


class SplitAndUploadUseCase:
    """Batch the .xml entries of a ZIP and upload each batch as its own archive."""

    def __init__(
        self,
        validator: Callable[[Path], None],
        reader_factory: Callable[[Path], ArchiveReader],
        packer: Packer,
        writer: ArchiveWriter,
        uploader: Uploader,
        stage: Callable[[str], AbstractContextManager[Path]],
        limits: BatchLimits,
        request_interval: float = 0.5,
        sleep: Callable[[float], None] = time.sleep,
        entry_filter: Callable[[Entry], bool] = lambda e: e.is_xml,
    ) -> None:
        self._validator = validator
        self._reader_factory = reader_factory
        self._packer = packer
        self._writer = writer
        self._uploader = uploader
        self._stage = stage
        self._limits = limits
        self._request_interval = request_interval
        self._sleep = sleep
        self._entry_filter = entry_filter

    def execute(self, zip_path: Path) -> SplitSummary:
        """Validate token and archive, then stage and upload every batch once."""
        started = time.perf_counter()
        self._uploader.validate_token()
        self._validator(zip_path)
        logger.info("ZIP file validation passed")

        with self._reader_factory(zip_path) as reader:
            entries = reader.entries(self._entry_filter)
            logger.info("Found %d XML files", len(entries))
            summary = SplitSummary(total_entries=len(entries))
            processed = 0
            for batch in self._packer.pack(entries, self._limits):
                filename = batch_filename(batch)
                error = self._stage_and_upload(batch, reader, filename)
                if error is None:
                    summary.successful_uploads += 1
                    logger.info("Successfully uploaded %s", filename)
                else:
                    summary.failed_uploads += 1
                    summary.failures.append((filename, error))
                    logger.error("Failed to upload %s: %s", filename, error)

                prev, processed = processed, processed + batch.count
                if prev // PROGRESS_EVERY != processed // PROGRESS_EVERY:
                    logger.info("Processed %d/%d files...", processed, summary.total_entries)

        summary.elapsed_seconds = time.perf_counter() - started
        return summary

    def _stage_and_upload(self, batch: Batch, reader: ArchiveReader, filename: str) -> str | None:
        duplicates = duplicate_basenames(batch)
        if duplicates:
            logger.warning(
                "%s holds several entries named %s; the archive will contain duplicate members",
                filename,
                ", ".join(duplicates),
            )
        with self._stage(Path(filename).stem) as staged:
            self._writer.write(batch, reader, staged, arcname=lambda e: e.basename)
            logger.info(
                "Uploading %s (batch %d) - %d files, %s",
                filename,
                batch.index,
                batch.count,
                format_size(staged.stat().st_size),
            )
            try:
                result = self._uploader.upload(staged, filename)
            finally:
                self._sleep(self._request_interval)
        return None if result.success else (result.error or "unknown error")

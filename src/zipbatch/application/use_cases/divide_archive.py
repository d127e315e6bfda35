"""Divide archive use case."""

import logging
import time
from collections.abc import Callable
from pathlib import Path

from zipbatch.application.dto.run_summary import DivideSummary
from zipbatch.application.ports import ArchiveReader, ArchiveWriter, Packer
from zipbatch.domain.exceptions import InvalidArchive
from zipbatch.domain.value_objects import BatchLimits, name_for

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 50


class DivideArchiveUseCase:
    """Split one ZIP into many smaller ZIPs named by batch label."""

    def __init__(
        self,
        validator: Callable[[Path], None],
        reader_factory: Callable[[Path], ArchiveReader],
        packer: Packer,
        writer: ArchiveWriter,
    ) -> None:
        self._validator = validator
        self._reader_factory = reader_factory
        self._packer = packer
        self._writer = writer

    def execute(
        self,
        zip_path: Path,
        limits: BatchLimits,
        output_dir: Path | None = None,
    ) -> DivideSummary:
        """Validate, pack and write every batch. Output goes next to the input by default."""
        started = time.perf_counter()
        self._validator(zip_path)
        logger.info("ZIP file validation passed")

        output_dir = output_dir or zip_path.parent
        output_dir.mkdir(parents=True, exist_ok=True)

        with self._reader_factory(zip_path) as reader:
            entries = reader.entries()
            logger.info("Found %d files", len(entries))
            summary = DivideSummary(total_entries=len(entries))

            batches = self._packer.pack(entries, limits)
            planned = [output_dir / f"{name_for(b.index)}.zip" for b in batches]
            source = zip_path.resolve()
            if any(p.resolve() == source for p in planned):
                raise InvalidArchive(
                    f"Output would overwrite the source archive: {zip_path}. "
                    "Rename it or choose another output directory."
                )

            written = 0
            for batch, destination in zip(batches, planned):
                self._writer.write(batch, reader, destination)
                summary.archives.append(destination)
                logger.debug(
                    "Wrote %s (%d files, %d bytes)",
                    destination.name,
                    batch.count,
                    batch.byte_total,
                )
                prev, written = written, written + batch.count
                if prev // PROGRESS_EVERY != written // PROGRESS_EVERY:
                    logger.info(
                        "%d/%d files processed, %d ZIPs created",
                        written,
                        summary.total_entries,
                        summary.archives_created,
                    )

        summary.elapsed_seconds = time.perf_counter() - started
        return summary

"""Application ports - interfaces for external adapters."""

from zipbatch.application.ports.archive_reader import ArchiveReader
from zipbatch.application.ports.archive_writer import ArchiveWriter
from zipbatch.application.ports.packer import Packer
from zipbatch.application.ports.uploader import Uploader

__all__ = [
    "ArchiveReader",
    "ArchiveWriter",
    "Packer",
    "Uploader",
]

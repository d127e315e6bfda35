"""Uploader port - remote archives API."""

from pathlib import Path
from typing import Protocol

from zipbatch.application.dto.upload_result import UploadResult


class Uploader(Protocol):
    """Port for validating credentials and uploading archives."""

    def validate_token(self) -> None: ...

    def upload(self, path: Path, filename: str) -> UploadResult: ...

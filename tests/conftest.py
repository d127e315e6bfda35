"""Pytest fixtures for zipbatch tests."""

from __future__ import annotations

import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

from zipbatch.application.dto.upload_result import UploadResult
from zipbatch.domain.entities import Entry


def entries_of_sizes(*sizes: int) -> list[Entry]:
    """Entries e1..eN with the given sizes."""
    return [Entry(name=f"e{i}", size=s) for i, s in enumerate(sizes, start=1)]


# --- Fake uploader ---


class FakeUploader:
    """In-memory uploader recording uploaded archives."""

    def __init__(self, fail_filenames: set[str] | None = None, token_valid: bool = True) -> None:
        self.fail_filenames = fail_filenames or set()
        self.token_valid = token_valid
        self.token_checks = 0
        self.uploads: list[tuple[str, list[str]]] = []  # (filename, member names)

    def validate_token(self) -> None:
        from zipbatch.domain.exceptions import InvalidToken

        self.token_checks += 1
        if not self.token_valid:
            raise InvalidToken("Invalid token or API error: 401 - unauthorized")

    def upload(self, path: Path, filename: str) -> UploadResult:
        with zipfile.ZipFile(path) as zf:
            self.uploads.append((filename, zf.namelist()))
        if filename in self.fail_filenames:
            return UploadResult.failed("HTTP 500: boom")
        return UploadResult.ok()


# --- Fixtures ---


@pytest.fixture
def make_zip(tmp_path: Path) -> Callable[..., Path]:
    """Build a ZIP under tmp_path from a name -> bytes mapping."""

    def _make(members: dict[str, bytes], name: str = "source.zip") -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_STORED) as zf:
            for member, data in members.items():
                zf.writestr(member, data)
        return path

    return _make


@pytest.fixture
def fake_uploader() -> FakeUploader:
    return FakeUploader()


@pytest.fixture
def sleeps() -> list[float]:
    """Collects delays instead of sleeping."""
    return []

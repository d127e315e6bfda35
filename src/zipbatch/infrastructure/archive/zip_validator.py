"""Fast ZIP validation by extension and magic bytes."""

from pathlib import Path

from zipbatch.domain.exceptions import InvalidArchive

# local file header, empty archive (end of central directory), spanned archive
ZIP_MAGIC_SIGNATURES: frozenset[bytes] = frozenset(
    {b"PK\x03\x04", b"PK\x05\x06", b"PK\x07\x08"}
)


def validate_zip_path(path: Path) -> None:
    """Raise InvalidArchive unless path is an existing .zip file with a ZIP signature."""
    if not path.is_file():
        raise InvalidArchive(f"ZIP file not found: {path}")
    if path.suffix.lower() != ".zip":
        raise InvalidArchive(f"File must be a ZIP file: {path}")
    with path.open("rb") as f:
        magic = f.read(4)
    if magic not in ZIP_MAGIC_SIGNATURES:
        raise InvalidArchive("Invalid ZIP file: not a valid ZIP archive")

"""Domain exceptions."""


class ZipBatchError(Exception):
    """Base exception for zipbatch."""

    pass


class ValidationError(ZipBatchError):
    """Input failed validation before any work started."""

    pass


class InvalidArchive(ValidationError):
    """Source path is missing, not a .zip file, or not a ZIP archive."""

    pass


class InvalidToken(ValidationError):
    """API rejected the token (or could not be reached to check it)."""

    pass


class UploadFailed(ZipBatchError):
    """A single archive upload was not accepted by the API."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Failed to upload {filename}: {reason}")
        self.filename = filename
        self.reason = reason

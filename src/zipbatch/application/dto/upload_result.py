"""Upload result DTO."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UploadResult:
    """Outcome of one upload attempt."""

    success: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> "UploadResult":
        return cls(success=True)

    @classmethod
    def failed(cls, error: str) -> "UploadResult":
        return cls(success=False, error=error)

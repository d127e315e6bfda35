"""Archives API client - token check and multipart archive upload."""

import logging
from pathlib import Path

import httpx

from zipbatch.application.dto.upload_result import UploadResult
from zipbatch.domain.exceptions import InvalidToken, UploadFailed

logger = logging.getLogger(__name__)

TOKEN_CHECK_PATH = "/api/v2/dfe/fiscal_documents"
ARCHIVES_PATH = "/api/v2/archives"


class ArchivesApiClient:
    """HTTP adapter for the archives API. Authenticates with a ``token`` header."""

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 60.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)
        self._owns_client = client is None
        self._headers = {"token": token}

    def __enter__(self) -> "ArchivesApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def validate_token(self) -> None:
        """Raise InvalidToken unless the token check endpoint answers 200."""
        try:
            r = self._client.get(
                f"{self._base_url}{TOKEN_CHECK_PATH}",
                params={"per_page": 1},
                headers=self._headers,
            )
        except httpx.HTTPError as e:
            raise InvalidToken(f"Invalid token or API error: {e}") from e
        if r.status_code != 200:
            raise InvalidToken(f"Invalid token or API error: {r.status_code} - {r.text}")
        logger.info("Token validation passed")

    def _post_archive(self, path: Path, filename: str) -> httpx.Response:
        with path.open("rb") as f:
            r = self._client.post(
                f"{self._base_url}{ARCHIVES_PATH}",
                files={"archive": (filename, f, "application/zip")},
                headers=self._headers,
            )
        if not r.is_success:
            raise UploadFailed(filename, f"HTTP {r.status_code}: {r.text}")
        return r

    def upload(self, path: Path, filename: str) -> UploadResult:
        """Upload one archive. Failures are returned, not raised."""
        try:
            self._post_archive(path, filename)
        except UploadFailed as e:
            return UploadResult.failed(e.reason)
        except (httpx.HTTPError, OSError) as e:
            return UploadResult.failed(str(e) or type(e).__name__)
        return UploadResult.ok()

"""
Registry source adapter — cache-or-fetch of the raw registry text via httpx.

Adapter layer — implements the RegistrySource port.

Flow:
  1. Cache file exists → read it and return its text
  2. Otherwise GET the registry URL (HTTP 200 required)
  3. Write the downloaded body to a ".part" file beside the cache, move it
     into place with Path.replace, then return it

Retry/backoff via tenacity on transient errors (network, timeout).
All HTTP and filesystem errors are captured into Result failures — no
exceptions leak to the parsing layer.
"""

from __future__ import annotations

from pathlib import Path

import httpx
import structlog
from railway import ErrorCode
from railway.result import Result
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

log = structlog.get_logger()

REGISTRY_URL = "https://www.iana.org/assignments/language-subtag-registry/language-subtag-registry"
CACHE_PATH = Path("registry.txt")


class CachedRegistrySource:
    """
    Provide the registry text from a local cache, downloading it when absent.

    Implements the RegistrySource port.
    Uses tenacity retry on transient network errors only.
    """

    def __init__(
        self,
        url: str = REGISTRY_URL,
        cache_path: Path | str = CACHE_PATH,
        timeout: int = 60,
    ) -> None:
        self._url = url
        self._cache_path = Path(cache_path)
        self._timeout = timeout

    def fetch(self) -> Result[str]:
        """
        Return the full registry text.

        Returns Result.failure(CACHE_ERROR, ...) if the cache cannot be read
        or written, Result.failure(FETCH_ERROR, ...) if the download fails.
        """
        if self._cache_path.is_file():
            log.info("registry.cache_hit", path=str(self._cache_path))
            return self._read_cache()

        log.info("registry.cache_miss", path=str(self._cache_path), url=self._url)
        return (
            Result.from_computation(
                self._do_download,
                ErrorCode.FETCH_ERROR,
                f"Failed to download registry from {self._url}",
            )
            .flat_map(self._write_cache)
        )

    def _read_cache(self) -> Result[str]:
        return Result.from_computation(
            lambda: self._cache_path.read_text(encoding="utf-8"),
            ErrorCode.CACHE_ERROR,
            f"Failed to read cache file {self._cache_path}",
        )

    def _write_cache(self, text: str) -> Result[str]:
        """Populate the cache file, passing the text through on success."""
        return Result.from_computation(
            lambda: self._do_write(text),
            ErrorCode.CACHE_ERROR,
            f"Failed to write cache file {self._cache_path}",
        ).map(lambda _: text)

    def _do_write(self, text: str) -> int:
        """Write beside the cache file, then move it into place in one step."""
        self._cache_path.parent.mkdir(parents=True, exist_ok=True)
        partial = self._cache_path.with_name(self._cache_path.name + ".part")
        try:
            written = partial.write_text(text, encoding="utf-8")
            partial.replace(self._cache_path)
        finally:
            partial.unlink(missing_ok=True)
        log.info("registry.cache_written", path=str(self._cache_path), size_chars=written)
        return written

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=0.1, max=30),
        retry=retry_if_exception_type((httpx.TimeoutException, httpx.NetworkError)),
        reraise=True,
    )
    def _do_download(self) -> str:
        """HTTP GET with retry — exceptions caught by from_computation."""
        with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
            response = client.get(self._url)
            response.raise_for_status()
            if response.status_code != httpx.codes.OK:
                raise httpx.HTTPStatusError(
                    f"Expected HTTP 200, got {response.status_code} {response.reason_phrase}",
                    request=response.request,
                    response=response,
                )
            text = response.text
            log.info("registry.fetched", url=self._url, size_bytes=len(response.content))
            return text

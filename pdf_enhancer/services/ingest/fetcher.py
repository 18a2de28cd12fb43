"""HTTP page fetcher."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from pdf_enhancer.config.settings import extraction_settings
from pdf_enhancer.domain.errors import ExtractionFailure

logger = logging.getLogger(__name__)


@dataclass
class FetchedPage:
    url: str
    html: str


class PageFetcher:
    """GET a page and return its HTML, failing on any non-2xx status."""

    def __init__(
        self,
        user_agent: Optional[str] = None,
        timeout: Optional[int] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.user_agent = user_agent or extraction_settings.user_agent
        self.timeout = timeout if timeout is not None else extraction_settings.timeout
        self._client = client or httpx.Client(timeout=self.timeout, follow_redirects=True)

    def fetch(self, url: str) -> FetchedPage:
        try:
            resp = self._client.get(url, headers={"User-Agent": self.user_agent})
        except httpx.HTTPError as exc:
            logger.error("Fetching %s failed: %s", url, exc)
            raise ExtractionFailure(f"Failed to fetch content: {exc}") from exc

        if not resp.is_success:
            logger.error("Fetching %s returned HTTP %s", url, resp.status_code)
            raise ExtractionFailure(
                f"Failed to fetch content: {resp.status_code} {resp.reason_phrase}".rstrip()
            )

        return FetchedPage(url=str(resp.url), html=resp.text)


__all__ = ["FetchedPage", "PageFetcher"]

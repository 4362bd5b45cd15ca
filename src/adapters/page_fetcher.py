"""HTTP page fetcher used for bookmark meta discovery."""

import logging

import httpx

from src.domain.errors import SourceUnavailable

logger = logging.getLogger(__name__)


class HttpxPageFetcher:
    def __init__(
        self,
        user_agent: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._headers = {"User-Agent": user_agent}
        self._timeout = timeout
        self._transport = transport

    async def fetch_html(self, url: str) -> str:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(url, headers=self._headers)
            return response.text
        except httpx.HTTPError as exc:
            logger.warning("Failed to fetch %s: %s", url, exc)
            raise SourceUnavailable("Failed to fetch site information") from exc

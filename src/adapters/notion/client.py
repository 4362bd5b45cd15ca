"""
NotionContentClient - paginated access to the Notion REST API.

Implements ContentSourcePort over httpx. Each public call opens its own
AsyncClient so concurrent requests never share connection state. Any
failure (transport error, timeout, non-2xx status, malformed body) is
raised as SourceUnavailable; there is no retry, and a failed page aborts
the whole fetch.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from src.domain.errors import SourceUnavailable

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.notion.com"
DEFAULT_API_VERSION = "2022-06-28"


class NotionContentClient:
    """Content source backed by Notion databases."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        page_size: int = 100,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._api_version = api_version
        self._page_size = page_size
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
            headers={
                "Authorization": f"Bearer {self._token}",
                "Notion-Version": self._api_version,
                "Content-Type": "application/json",
            },
        )

    async def _request(
        self,
        client: httpx.AsyncClient,
        method: str,
        path: str,
        json_payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        try:
            response = await client.request(method, path, json=json_payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Content store returned %s for %s %s",
                exc.response.status_code,
                method,
                path,
            )
            raise SourceUnavailable(
                f"Content store responded with status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("Content store request %s %s failed: %s", method, path, exc)
            raise SourceUnavailable("Content store unreachable") from exc
        except ValueError as exc:
            logger.error("Content store sent malformed JSON for %s %s", method, path)
            raise SourceUnavailable("Content store sent a malformed response") from exc

        if not isinstance(body, dict):
            raise SourceUnavailable("Content store sent a malformed response")
        return body

    async def fetch_all(
        self,
        database_id: str,
        sorts: list[dict[str, Any]] | None = None,
        filter: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Query every page of a database in upstream order."""
        records: list[dict[str, Any]] = []
        cursor: str | None = None
        pages = 0

        async with self._client() as client:
            while True:
                payload: dict[str, Any] = {"page_size": self._page_size}
                if sorts:
                    payload["sorts"] = sorts
                if filter:
                    payload["filter"] = filter
                if cursor:
                    payload["start_cursor"] = cursor

                body = await self._request(
                    client, "POST", f"/v1/databases/{database_id}/query", payload
                )
                pages += 1

                results = body.get("results")
                if not isinstance(results, list):
                    raise SourceUnavailable("Content store sent a malformed response")
                records.extend(
                    r for r in results if isinstance(r, dict) and "properties" in r
                )

                cursor = body.get("next_cursor") or None
                if not body.get("has_more") or not cursor:
                    break

        logger.debug(
            "Fetched %d records from %s in %d page(s)", len(records), database_id, pages
        )
        return records

    async def retrieve_database(self, database_id: str) -> dict[str, Any]:
        async with self._client() as client:
            return await self._request(client, "GET", f"/v1/databases/{database_id}")

    async def create_page(
        self, database_id: str, properties: dict[str, Any]
    ) -> dict[str, Any]:
        payload = {"parent": {"database_id": database_id}, "properties": properties}
        async with self._client() as client:
            page = await self._request(client, "POST", "/v1/pages", payload)
        logger.info("Created page %s in %s", page.get("id"), database_id)
        return page

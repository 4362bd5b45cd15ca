from typing import Any, Protocol


class ContentSourcePort(Protocol):
    """Read/append access to the upstream content store.

    Every method raises ``SourceUnavailable`` on any upstream failure.
    """

    async def fetch_all(
        self,
        database_id: str,
        sorts: list[dict[str, Any]] | None = None,
        filter: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Return every record of a database, following pagination."""
        ...

    async def retrieve_database(self, database_id: str) -> dict[str, Any]:
        """Return the database object itself (title, icon, schema)."""
        ...

    async def create_page(
        self, database_id: str, properties: dict[str, Any]
    ) -> dict[str, Any]:
        """Append one record and return the created page."""
        ...


class PageFetcherPort(Protocol):
    async def fetch_html(self, url: str) -> str:
        """Return the HTML body at ``url``; raises ``SourceUnavailable``."""
        ...

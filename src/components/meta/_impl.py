"""
Page meta extraction - Functional Core.

Reads the page title and the best icon link from an HTML document and
resolves the icon against the page's origin.
"""

from __future__ import annotations

from urllib.parse import urlsplit

from bs4 import BeautifulSoup

_ICON_RELS = (["icon"], ["shortcut", "icon"])
_APPLE_ICON_RELS = (["apple-touch-icon"],)


def _origin(page_url: str) -> tuple[str, str]:
    parts = urlsplit(page_url)
    return parts.scheme, f"{parts.scheme}://{parts.netloc}"


def _rel_of(tag: object) -> list[str]:
    rel = tag.get("rel")  # type: ignore[attr-defined]
    if isinstance(rel, str):
        rel = rel.split()
    return [value.lower() for value in rel or []]


def find_icon_href(soup: BeautifulSoup) -> str:
    """Return the icon href: rel=icon first, then apple-touch-icon, else ""."""
    links = soup.find_all("link", href=True)
    for wanted in (_ICON_RELS, _APPLE_ICON_RELS):
        for tag in links:
            if _rel_of(tag) in wanted:
                return str(tag["href"]).strip()
    return ""


def resolve_icon_url(href: str, page_url: str) -> str:
    """Resolve an icon href against the page origin; default to /favicon.ico."""
    scheme, origin = _origin(page_url)
    if not href:
        return f"{origin}/favicon.ico"
    if href.startswith("//"):
        return f"{scheme}:{href}"
    if href.startswith("/"):
        return f"{origin}{href}"
    if not href.startswith("http"):
        return f"{origin}/{href}"
    return href


def extract_meta(html: str, page_url: str) -> tuple[str, str]:
    """Return ``(title, icon_url)`` for a fetched page."""
    soup = BeautifulSoup(html, "html.parser")
    title = soup.title.get_text(strip=True) if soup.title else ""
    return title, resolve_icon_url(find_icon_href(soup), page_url)

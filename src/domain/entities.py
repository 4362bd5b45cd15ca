from typing import Literal

from pydantic import BaseModel, Field

# --- Enums / Literals ---
Identity = Literal["admin", "anonymous"]

DEFAULT_CATEGORY1 = "Uncategorized"
DEFAULT_CATEGORY2 = "Default"
DEFAULT_LINK_ICON = "/globe.svg"

# --- Links ---

class Link(BaseModel):
    id: str
    name: str = ""
    url: str = "#"
    desc: str = ""
    category1: str = DEFAULT_CATEGORY1
    category2: str = DEFAULT_CATEGORY2
    iconfile: str = ""
    iconlink: str = ""
    tags: list[str] = Field(default_factory=list)
    created: str = ""
    is_admin_only: bool = False

    @property
    def icon(self) -> str:
        """Uploaded icon wins over linked icon; globe otherwise."""
        return self.iconfile or self.iconlink or DEFAULT_LINK_ICON

# --- Categories ---

class SubCategory(BaseModel):
    id: str
    name: str

class Category(BaseModel):
    id: str
    name: str = ""
    icon_name: str = ""
    order: int = 0
    enabled: bool = False
    sub_categories: list[SubCategory] = Field(default_factory=list)

# --- Site Config ---

WebsiteConfig = dict[str, str]

# --- Navigation View ---

class NavigationView(BaseModel):
    """Render-ready navigation for one viewer."""

    categories: list[Category] = Field(default_factory=list)
    grouped: dict[str, dict[str, list[Link]]] = Field(default_factory=dict)
    total_links: int = 0

class Snapshot(BaseModel):
    """Everything fetched upstream for one render."""

    links: list[Link] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)
    config: WebsiteConfig = Field(default_factory=dict)

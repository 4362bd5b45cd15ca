from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import Category, Link


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# --- Links ---
class LinkResponse(_CamelModel):
    id: str
    name: str
    url: str
    desc: str
    category1: str
    category2: str
    iconfile: str
    iconlink: str
    icon: str
    tags: list[str]
    created: str
    is_admin_only: bool = Field(alias="isAdminOnly")

    @classmethod
    def from_link(cls, link: Link) -> "LinkResponse":
        return cls(
            id=link.id,
            name=link.name,
            url=link.url,
            desc=link.desc,
            category1=link.category1,
            category2=link.category2,
            iconfile=link.iconfile,
            iconlink=link.iconlink,
            icon=link.icon,
            tags=list(link.tags),
            created=link.created,
            is_admin_only=link.is_admin_only,
        )


class LinkCreateRequest(_CamelModel):
    # Required-ness is checked by the links component so the caller gets a 400.
    name: str = ""
    url: str = ""
    desc: str = ""
    category1: str | None = None
    category2: str | None = None
    tags: list[str] = Field(default_factory=list)
    iconlink: str | None = None
    is_admin_only: bool = Field(default=False, alias="isAdminOnly")


class LinkCreateResponse(BaseModel):
    success: bool
    message: str
    id: str


# --- Categories ---
class SubCategoryResponse(BaseModel):
    id: str
    name: str


class CategoryResponse(_CamelModel):
    id: str
    name: str
    icon_name: str = Field(alias="iconName")
    order: int
    sub_categories: list[SubCategoryResponse] = Field(alias="subCategories")

    @classmethod
    def from_category(cls, category: Category) -> "CategoryResponse":
        return cls(
            id=category.id,
            name=category.name,
            icon_name=category.icon_name,
            order=category.order,
            sub_categories=[
                SubCategoryResponse(id=s.id, name=s.name) for s in category.sub_categories
            ],
        )


# --- Navigation ---
class NavigationResponse(_CamelModel):
    config: dict[str, str]
    widgets: list[str]
    categories: list[CategoryResponse]
    links: dict[str, dict[str, list[LinkResponse]]]
    is_admin: bool = Field(alias="isAdmin")
    search_result_count: int = Field(alias="searchResultCount")


# --- Meta ---
class FetchMetaRequest(BaseModel):
    url: str = ""


class FetchMetaResponse(BaseModel):
    success: bool
    title: str
    icon: str


# --- Auth ---
class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""


class LoginResponse(_CamelModel):
    success: bool
    message: str
    is_admin: bool = Field(alias="isAdmin")


class AuthCheckResponse(_CamelModel):
    is_admin: bool = Field(alias="isAdmin")
    message: str


class MessageResponse(BaseModel):
    success: bool
    message: str


# --- Sync ---
class RevalidateResponse(_CamelModel):
    success: bool
    message: str
    revalidated_at: str = Field(alias="revalidatedAt")


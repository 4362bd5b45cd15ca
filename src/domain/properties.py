"""
Upstream record properties as a tagged union.

A content-store record is a bag of properties keyed by name, each tagged
with a ``type``. ``parse_property`` turns one raw property into the
matching model; anything unrecognised or malformed becomes
``UnknownProperty``. The ``*_of`` extractors read one typed value and
return the documented default when the property is missing or of another
type, so callers never branch on raw dicts.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError


class _Prop(BaseModel):
    model_config = ConfigDict(extra="ignore")


class TextSegment(_Prop):
    plain_text: str = ""


class SelectOption(_Prop):
    name: str = ""


class FileUrl(_Prop):
    url: str = ""


class FileEntry(_Prop):
    type: str = ""
    name: str = ""
    file: FileUrl | None = None
    external: FileUrl | None = None

    @property
    def url(self) -> str:
        if self.type == "external" and self.external:
            return self.external.url
        if self.type == "file" and self.file:
            return self.file.url
        return ""


class TitleProperty(_Prop):
    type: Literal["title"] = "title"
    title: list[TextSegment] = Field(default_factory=list)


class RichTextProperty(_Prop):
    type: Literal["rich_text"] = "rich_text"
    rich_text: list[TextSegment] = Field(default_factory=list)


class SelectProperty(_Prop):
    type: Literal["select"] = "select"
    select: SelectOption | None = None


class MultiSelectProperty(_Prop):
    type: Literal["multi_select"] = "multi_select"
    multi_select: list[SelectOption] = Field(default_factory=list)


class CheckboxProperty(_Prop):
    type: Literal["checkbox"] = "checkbox"
    checkbox: bool = False


class FilesProperty(_Prop):
    type: Literal["files"] = "files"
    files: list[FileEntry] = Field(default_factory=list)


class UrlProperty(_Prop):
    type: Literal["url"] = "url"
    url: str | None = None


class NumberProperty(_Prop):
    type: Literal["number"] = "number"
    number: float | None = None


class CreatedTimeProperty(_Prop):
    type: Literal["created_time"] = "created_time"
    created_time: str = ""


class UnknownProperty(_Prop):
    type: str = "unknown"


PropertyValue = (
    TitleProperty
    | RichTextProperty
    | SelectProperty
    | MultiSelectProperty
    | CheckboxProperty
    | FilesProperty
    | UrlProperty
    | NumberProperty
    | CreatedTimeProperty
    | UnknownProperty
)

_PROPERTY_TYPES: dict[str, type[_Prop]] = {
    "title": TitleProperty,
    "rich_text": RichTextProperty,
    "select": SelectProperty,
    "multi_select": MultiSelectProperty,
    "checkbox": CheckboxProperty,
    "files": FilesProperty,
    "url": UrlProperty,
    "number": NumberProperty,
    "created_time": CreatedTimeProperty,
}


def parse_property(raw: Any) -> PropertyValue:
    """Parse one raw property dict into its typed variant."""
    if not isinstance(raw, dict):
        return UnknownProperty()

    kind = raw.get("type")
    model = _PROPERTY_TYPES.get(kind) if isinstance(kind, str) else None
    if model is None:
        return UnknownProperty(type=kind if isinstance(kind, str) else "unknown")

    try:
        return model.model_validate(raw)  # type: ignore[return-value]
    except PydanticValidationError:
        return UnknownProperty(type=kind)


def parse_properties(record: Any) -> dict[str, PropertyValue]:
    """Parse the ``properties`` bag of a raw record."""
    if not isinstance(record, dict):
        return {}
    props = record.get("properties")
    if not isinstance(props, dict):
        return {}
    return {str(name): parse_property(value) for name, value in props.items()}


# --- Extractors ---


def _join(segments: list[TextSegment]) -> str:
    return "".join(segment.plain_text for segment in segments)


def title_of(prop: PropertyValue | None) -> str:
    return _join(prop.title) if isinstance(prop, TitleProperty) else ""


def rich_text_of(prop: PropertyValue | None) -> str:
    return _join(prop.rich_text) if isinstance(prop, RichTextProperty) else ""


def select_of(prop: PropertyValue | None) -> str:
    if isinstance(prop, SelectProperty) and prop.select:
        return prop.select.name
    return ""


def multi_select_of(prop: PropertyValue | None) -> list[str]:
    if isinstance(prop, MultiSelectProperty):
        return [option.name for option in prop.multi_select if option.name]
    return []


def checkbox_of(prop: PropertyValue | None) -> bool:
    return prop.checkbox if isinstance(prop, CheckboxProperty) else False


def first_file_url_of(prop: PropertyValue | None) -> str:
    if isinstance(prop, FilesProperty) and prop.files:
        return prop.files[0].url
    return ""


def url_of(prop: PropertyValue | None) -> str:
    if isinstance(prop, UrlProperty) and prop.url:
        return prop.url
    return ""


def number_of(prop: PropertyValue | None, default: float = 0) -> float:
    if isinstance(prop, NumberProperty) and prop.number is not None:
        return prop.number
    return default


def created_time_of(prop: PropertyValue | None) -> str:
    return prop.created_time if isinstance(prop, CreatedTimeProperty) else ""

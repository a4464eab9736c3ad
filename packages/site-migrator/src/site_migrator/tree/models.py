"""Pydantic models for site configuration trees.

Field names are snake_case in Python; the stored documents use camelCase,
which is accepted on input and emitted by ``ConfigTree.to_dict()``. Unknown
keys are kept on every node so a copied page or section never loses data the
engine does not know about.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from site_migrator.exceptions import TreeValidationError

_NODE_CONFIG = ConfigDict(extra="allow", populate_by_name=True)


def _none_as_empty(v: Any) -> Any:
    return [] if v is None else v


class Section(BaseModel):
    """One block on a page. ``type`` and ``props`` are opaque payload."""

    model_config = _NODE_CONFIG

    id: str = Field(min_length=1)
    type: str | None = None
    props: dict[str, Any] = Field(default_factory=dict)
    is_new: bool = Field(default=False, alias="_isNew")


class SeoMeta(BaseModel):
    model_config = _NODE_CONFIG

    description: str | None = None
    og_image: str | None = Field(default=None, alias="ogImage")


class DynamicConfig(BaseModel):
    """Marks a page as backed by a user-managed collection (articles, products...)."""

    model_config = _NODE_CONFIG

    collection_type: str | None = Field(default=None, alias="collectionType")
    item_template: Any = Field(default=None, alias="itemTemplate")
    list_template: Any = Field(default=None, alias="listTemplate")


class Page(BaseModel):
    model_config = _NODE_CONFIG

    id: str = Field(min_length=1)
    slug: str | None = None
    title: str | None = None
    seo: SeoMeta | None = None
    sections: list[Section] = Field(default_factory=list)
    is_dynamic: bool = Field(default=False, alias="isDynamic")
    dynamic_config: DynamicConfig | None = Field(default=None, alias="dynamicConfig")
    is_new: bool = Field(default=False, alias="_isNew")

    @field_validator("sections", mode="before")
    @classmethod
    def sections_none_as_empty(cls, v: Any) -> Any:
        return _none_as_empty(v)

    def find_section(self, section_id: str) -> Section | None:
        """Return the section with *section_id*; the last one wins on duplicates."""
        return _last_match(self.sections, section_id)

    def has_section(self, section_id: str) -> bool:
        return any(s.id == section_id for s in self.sections)


class Theme(BaseModel):
    """Color slots and typography settings."""

    model_config = _NODE_CONFIG

    color: dict[str, Any] | None = None
    font: str | None = None
    font_size: dict[str, Any] | None = Field(default=None, alias="fontSize")
    font_weight: dict[str, Any] | None = Field(default=None, alias="fontWeight")

    def color_slots(self) -> list[str]:
        return list(self.color or {})


class NavigationItem(BaseModel):
    model_config = _NODE_CONFIG

    label: str | None = None
    href: str


class ConfigTree(BaseModel):
    """One version of a site's structure: a template or a user's clone of it."""

    model_config = _NODE_CONFIG

    pages: list[Page] = Field(default_factory=list)
    theme: Theme | None = None
    # None when absent, which compares differently from []
    navigation: list[NavigationItem] | None = None
    footer: Any = None

    @field_validator("pages", mode="before")
    @classmethod
    def pages_none_as_empty(cls, v: Any) -> Any:
        return _none_as_empty(v)

    @classmethod
    def coerce(cls, value: ConfigTree | Mapping[str, Any], source: str = "<tree>") -> ConfigTree:
        """Accept a model or its plain mapping form.

        Raises TreeValidationError when *value* cannot be read as a tree.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise TreeValidationError(
                source, TypeError(f"expected a mapping, got {type(value).__name__}")
            )
        try:
            return cls.model_validate(dict(value))
        except ValidationError as e:
            raise TreeValidationError(source, e) from e

    def find_page(self, page_id: str) -> Page | None:
        """Return the page with *page_id*; the last one wins on duplicates."""
        return _last_match(self.pages, page_id)

    def has_page(self, page_id: str) -> bool:
        return any(p.id == page_id for p in self.pages)

    def clone(self) -> ConfigTree:
        """Structural deep copy; shares no mutable state with ``self``."""
        return self.model_copy(deep=True)

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping in stored-document form (camelCase, unset defaults omitted)."""
        return self.model_dump(by_alias=True, exclude_unset=True)


def _last_match(items: list, item_id: str):
    found = None
    for item in items:
        if item.id == item_id:
            found = item
    return found

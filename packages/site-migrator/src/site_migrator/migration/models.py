"""Data models for migration reports."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field

from site_migrator.exceptions import TreeValidationError


class ChangeKind(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


class ChangeCategory(str, Enum):
    PAGE = "page"
    SECTION = "section"
    THEME = "theme"
    NAVIGATION = "navigation"


class ChangeRecord(BaseModel):
    """One detected difference between two config trees.

    ``path`` addresses exactly one node of the tree named by ``category``,
    e.g. ``pages.home.sections.hero``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: ChangeKind = Field(alias="type")
    category: ChangeCategory
    path: str = Field(min_length=1)
    description: str
    requires_action: bool = Field(alias="requiresAction")
    action_description: str | None = Field(default=None, alias="actionDescription")


class MigrationReport(BaseModel):
    """Ordered change list between two template versions.

    The summary counts are derived from ``changes`` on every access and are
    included when the report is dumped.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_version: str | None = Field(default=None, alias="fromVersion")
    to_version: str | None = Field(default=None, alias="toVersion")
    changes: list[ChangeRecord] = Field(default_factory=list)

    @computed_field(alias="totalChanges")
    @property
    def total_changes(self) -> int:
        return len(self.changes)

    @computed_field(alias="changesRequiringAction")
    @property
    def changes_requiring_action(self) -> int:
        return sum(1 for c in self.changes if c.requires_action)

    @classmethod
    def coerce(cls, value: MigrationReport | Mapping[str, Any]) -> MigrationReport:
        """Accept a report or its dumped mapping form."""
        if isinstance(value, cls):
            return value
        try:
            return cls.model_validate(value)
        except ValidationError as e:
            raise TreeValidationError("<report>", e) from e

    def filter(
        self,
        kind: ChangeKind | None = None,
        category: ChangeCategory | None = None,
    ) -> list[ChangeRecord]:
        return [
            c for c in self.changes
            if (kind is None or c.kind == kind)
            and (category is None or c.category == category)
        ]

    def requiring_action(self) -> list[ChangeRecord]:
        return [c for c in self.changes if c.requires_action]

    def paths(self) -> list[str]:
        return [c.path for c in self.changes]

    def to_dict(self) -> dict[str, Any]:
        """Wire form: camelCase keys, enum values as strings, counts included."""
        return self.model_dump(by_alias=True, mode="json")

"""Caller-side update workflow: version gate, report, merge.

The engine never looks at versions beyond carrying them into the report.
These helpers do what a site service does around it: skip the comparison
when the site already tracks the latest template version, and hand back the
version to record once a merge has been produced.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from site_migrator.exceptions import NoUpdateAvailableError
from site_migrator.migration.applicator import merge_additions
from site_migrator.migration.models import MigrationReport
from site_migrator.migration.report import compare
from site_migrator.tree.models import ConfigTree

logger = logging.getLogger(__name__)


class UpdateCheck(BaseModel):
    """Whether a newer template version exists, and what it would change."""

    update_available: bool
    current_version: str | None = None
    latest_version: str | None = None
    report: MigrationReport | None = None


class UpdateResult(BaseModel):
    """A merged tree and the template version it was drawn from."""

    tree: ConfigTree
    previous_version: str | None = None
    new_version: str | None = None
    report: MigrationReport
    applied_paths: list[str] = Field(default_factory=list)

    @property
    def applied_changes(self) -> int:
        return len(self.applied_paths)


def check_for_update(
    user_tree: ConfigTree | Mapping[str, Any],
    current_version: str | None,
    template_tree: ConfigTree | Mapping[str, Any],
    latest_version: str | None,
) -> UpdateCheck:
    """Report pending template changes, or nothing when versions match."""
    if current_version == latest_version:
        return UpdateCheck(update_available=False, current_version=current_version)

    report = compare(user_tree, template_tree, current_version, latest_version)
    return UpdateCheck(
        update_available=True,
        current_version=current_version,
        latest_version=latest_version,
        report=report,
    )


def apply_update(
    user_tree: ConfigTree | Mapping[str, Any],
    current_version: str | None,
    template_tree: ConfigTree | Mapping[str, Any],
    latest_version: str | None,
    accepted_changes: list[str] | None = None,
    *,
    flag_new_items: bool = True,
) -> UpdateResult:
    """Compare and merge in one step.

    Every ``added`` change is applied. *accepted_changes* (paths the user
    selected) is recorded in the log only and does not narrow the merge.
    Raises NoUpdateAvailableError when the site already tracks
    *latest_version*.
    """
    if current_version == latest_version:
        raise NoUpdateAvailableError(str(current_version))
    if accepted_changes is not None:
        logger.debug(
            "Ignoring change selection (%d path(s)); all additions are applied",
            len(accepted_changes),
        )

    report = compare(user_tree, template_tree, current_version, latest_version)
    merged = merge_additions(user_tree, template_tree, report, flag_new_items=flag_new_items)
    logger.info(
        "Updated site from template %s to %s (%d of %d changes applied)",
        current_version, latest_version, len(merged.applied_paths), report.total_changes,
    )
    return UpdateResult(
        tree=merged.tree,
        previous_version=current_version,
        new_version=latest_version,
        report=report,
        applied_paths=merged.applied_paths,
    )

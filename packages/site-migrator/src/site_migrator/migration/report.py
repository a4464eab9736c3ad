"""Build a MigrationReport from two config trees."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from site_migrator.migration.comparators import (
    compare_navigation,
    compare_pages,
    compare_theme,
)
from site_migrator.migration.models import MigrationReport
from site_migrator.tree.models import ConfigTree

logger = logging.getLogger(__name__)


def compare(
    old_tree: ConfigTree | Mapping[str, Any],
    new_tree: ConfigTree | Mapping[str, Any],
    from_version: str | None = None,
    to_version: str | None = None,
) -> MigrationReport:
    """Compare a user's tree (*old_tree*) against a newer template tree.

    Records are ordered pages (with their sections) first, then theme, then
    navigation. Versions are carried through untouched; callers skip this
    call entirely when they are equal.
    """
    old = ConfigTree.coerce(old_tree, source="old tree")
    new = ConfigTree.coerce(new_tree, source="new tree")

    changes = compare_pages(old.pages, new.pages)
    changes.extend(compare_theme(old.theme, new.theme))
    changes.extend(compare_navigation(old.navigation, new.navigation))

    report = MigrationReport(
        from_version=from_version,
        to_version=to_version,
        changes=changes,
    )
    logger.debug(
        "Migration %s -> %s: %d changes, %d requiring action",
        from_version, to_version, report.total_changes, report.changes_requiring_action,
    )
    return report

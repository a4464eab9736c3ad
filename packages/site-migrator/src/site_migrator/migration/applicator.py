"""Merge template additions into a user's config tree.

Only ``added`` records are acted on. Removed and modified records, and every
navigation record, are reported for visibility and never applied, so user
content is never dropped or overwritten. Each record is applied
independently: a record whose counterpart is missing is skipped without
affecting the rest of the merge.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from site_migrator.exceptions import InvalidChangePathError
from site_migrator.migration.models import (
    ChangeCategory,
    ChangeKind,
    ChangeRecord,
    MigrationReport,
)
from site_migrator.migration.paths import parse_page_path, parse_section_path
from site_migrator.tree.models import ConfigTree, Theme

logger = logging.getLogger(__name__)


class MergeResult(BaseModel):
    """Merged tree plus the paths of the records that changed it."""

    tree: ConfigTree
    applied_paths: list[str] = Field(default_factory=list)
    skipped_paths: list[str] = Field(default_factory=list)


def merge_additions(
    user_tree: ConfigTree | Mapping[str, Any],
    template_tree: ConfigTree | Mapping[str, Any],
    report: MigrationReport | Mapping[str, Any],
    *,
    flag_new_items: bool = True,
) -> MergeResult:
    """Apply every ``added`` record of *report* to a copy of *user_tree*.

    Copied pages and sections get ``_isNew`` set when *flag_new_items* is
    true. Neither input tree is modified.
    """
    user = ConfigTree.coerce(user_tree, source="user tree")
    template = ConfigTree.coerce(template_tree, source="template tree")
    report = MigrationReport.coerce(report)

    merged = user.clone()
    applied_paths: list[str] = []
    skipped_paths: list[str] = []

    for change in report.changes:
        if change.kind != ChangeKind.ADDED:
            continue
        handler = _HANDLERS.get(change.category)
        if handler is None:
            continue
        try:
            applied = handler(merged, template, change, flag_new_items)
        except InvalidChangePathError as e:
            logger.warning("Skipping %s change: %s", change.category.value, e)
            applied = False
        if applied:
            applied_paths.append(change.path)
        else:
            skipped_paths.append(change.path)

    logger.debug(
        "Merged %d of %d changes from %s -> %s",
        len(applied_paths), report.total_changes,
        report.from_version, report.to_version,
    )
    return MergeResult(tree=merged, applied_paths=applied_paths, skipped_paths=skipped_paths)


def apply_migration(
    user_tree: ConfigTree | Mapping[str, Any],
    template_tree: ConfigTree | Mapping[str, Any],
    report: MigrationReport | Mapping[str, Any],
    *,
    flag_new_items: bool = True,
) -> ConfigTree:
    """Return a new tree with the template's additions merged into *user_tree*."""
    return merge_additions(
        user_tree, template_tree, report, flag_new_items=flag_new_items
    ).tree


def _add_page(
    merged: ConfigTree, template: ConfigTree, change: ChangeRecord, flag: bool
) -> bool:
    page_id = parse_page_path(change.path)
    source = template.find_page(page_id)
    if source is None:
        logger.warning("Template has no page %r for %s", page_id, change.path)
        return False
    if merged.has_page(page_id):
        return False

    page = source.model_copy(deep=True)
    if flag:
        page.is_new = True
    merged.pages.append(page)
    return True


def _add_section(
    merged: ConfigTree, template: ConfigTree, change: ChangeRecord, flag: bool
) -> bool:
    page_id, section_id = parse_section_path(change.path)
    template_page = template.find_page(page_id)
    user_page = merged.find_page(page_id)
    if template_page is None or user_page is None:
        logger.warning("Page %r missing for %s", page_id, change.path)
        return False

    source = template_page.find_section(section_id)
    if source is None:
        logger.warning("Template page %r has no section %r", page_id, section_id)
        return False
    if user_page.has_section(section_id):
        return False

    section = source.model_copy(deep=True)
    if flag:
        section.is_new = True
    user_page.sections.append(section)
    return True


def _merge_theme_colors(
    merged: ConfigTree, template: ConfigTree, change: ChangeRecord, flag: bool
) -> bool:
    template_colors = template.theme.color if template.theme is not None else None
    if not template_colors:
        return False
    if merged.theme is None:
        merged.theme = Theme()

    user_colors = merged.theme.color or {}
    missing = [slot for slot in template_colors if slot not in user_colors]
    # User-defined slots take precedence; the template only fills gaps.
    merged.theme.color = {**copy.deepcopy(template_colors), **user_colors}
    return bool(missing)


_HANDLERS = {
    ChangeCategory.PAGE: _add_page,
    ChangeCategory.SECTION: _add_section,
    ChangeCategory.THEME: _merge_theme_colors,
}

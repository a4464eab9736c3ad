"""Per-axis comparators: pages, sections, theme and navigation.

Each comparator returns change records in a deterministic order and never
touches its inputs. Only additions and removals are detected for pages and
sections; a page or section whose id is unchanged is not inspected further.
"""

from __future__ import annotations

import logging

from site_migrator.migration.differ import diff_collections
from site_migrator.migration.models import ChangeCategory, ChangeKind, ChangeRecord
from site_migrator.migration.paths import (
    THEME_COLOR_PATH,
    THEME_FONT_PATH,
    navigation_path,
    page_path,
    section_path,
)
from site_migrator.tree.models import NavigationItem, Page, Section, Theme

logger = logging.getLogger(__name__)


def _show(value: str | None) -> str:
    return f'"{value}"' if value is not None else "none"


def compare_pages(old_pages: list[Page], new_pages: list[Page]) -> list[ChangeRecord]:
    """Added pages, then removed pages, then section changes of common pages."""
    diff = diff_collections(old_pages, new_pages, key=lambda p: p.id)
    changes: list[ChangeRecord] = []

    for page_id in diff.added:
        page = diff.new_index[page_id]
        changes.append(ChangeRecord(
            kind=ChangeKind.ADDED,
            category=ChangeCategory.PAGE,
            path=page_path(page_id),
            description=f"New page added: {_show(page.title)} ({page.slug})",
            requires_action=True,
            action_description="Review and customize the new page content",
        ))

    for page_id in diff.removed:
        page = diff.old_index[page_id]
        changes.append(ChangeRecord(
            kind=ChangeKind.REMOVED,
            category=ChangeCategory.PAGE,
            path=page_path(page_id),
            description=f"Page removed: {_show(page.title)} ({page.slug})",
            requires_action=True,
            action_description=(
                "Your custom content for this page will be preserved "
                "but the page is no longer part of the template"
            ),
        ))

    for page_id in diff.common:
        changes.extend(compare_sections(
            diff.old_index[page_id].sections,
            diff.new_index[page_id].sections,
            page_id,
        ))

    logger.debug(
        "Pages: %d added, %d removed, %d compared",
        len(diff.added), len(diff.removed), len(diff.common),
    )
    return changes


def compare_sections(
    old_sections: list[Section],
    new_sections: list[Section],
    page_id: str,
) -> list[ChangeRecord]:
    """Section additions and removals within one page."""
    diff = diff_collections(old_sections, new_sections, key=lambda s: s.id)
    changes: list[ChangeRecord] = []

    for section_id in diff.added:
        section = diff.new_index[section_id]
        changes.append(ChangeRecord(
            kind=ChangeKind.ADDED,
            category=ChangeCategory.SECTION,
            path=section_path(page_id, section_id),
            description=f"New section added: {_show(section.type)}",
            requires_action=True,
            action_description="Configure the new section with your content",
        ))

    # Removed sections keep the user's content; nothing to decide.
    for section_id in diff.removed:
        section = diff.old_index[section_id]
        changes.append(ChangeRecord(
            kind=ChangeKind.REMOVED,
            category=ChangeCategory.SECTION,
            path=section_path(page_id, section_id),
            description=f"Section removed: {_show(section.type)}",
            requires_action=False,
            action_description="Your custom content will be preserved",
        ))

    return changes


def compare_theme(old_theme: Theme | None, new_theme: Theme | None) -> list[ChangeRecord]:
    """New color slots and font family changes.

    Font size and weight tokens are not compared. Nothing is reported when
    either theme is absent.
    """
    if old_theme is None or new_theme is None:
        return []

    changes: list[ChangeRecord] = []

    old_slots = set(old_theme.color_slots())
    added_slots = [s for s in new_theme.color_slots() if s not in old_slots]
    if added_slots:
        changes.append(ChangeRecord(
            kind=ChangeKind.ADDED,
            category=ChangeCategory.THEME,
            path=THEME_COLOR_PATH,
            description=f"New color options: {', '.join(added_slots)}",
            requires_action=False,
            action_description="Optional: customize the new color settings",
        ))

    if new_theme.font != old_theme.font:
        changes.append(ChangeRecord(
            kind=ChangeKind.MODIFIED,
            category=ChangeCategory.THEME,
            path=THEME_FONT_PATH,
            description=f"Font changed from {_show(old_theme.font)} to {_show(new_theme.font)}",
            requires_action=True,
            action_description="Review if you want to keep your current font or adopt the new one",
        ))

    return changes


def compare_navigation(
    old_items: list[NavigationItem] | None,
    new_items: list[NavigationItem] | None,
) -> list[ChangeRecord]:
    """Navigation items whose ``href`` is new.

    Removed items and relabelled items (same ``href``) are not reported.
    Nothing is reported when either list is absent; an empty list is not
    absent, so every item of the other side counts as new.
    """
    if old_items is None or new_items is None:
        return []

    diff = diff_collections(old_items, new_items, key=lambda n: n.href)
    changes: list[ChangeRecord] = []

    for href in diff.added:
        item = diff.new_index[href]
        changes.append(ChangeRecord(
            kind=ChangeKind.ADDED,
            category=ChangeCategory.NAVIGATION,
            path=navigation_path(href),
            description=f"New navigation item: {_show(item.label)}",
            requires_action=True,
            action_description="Decide if you want to include this navigation item",
        ))

    return changes

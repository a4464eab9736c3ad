"""Build and parse the locator paths carried by change records.

Formats::

    pages.<pageId>
    pages.<pageId>.sections.<sectionId>
    theme.color
    theme.font
    navigation.<href>

Identifiers are embedded verbatim. A page id is read up to the first
``.sections.`` marker, so page ids containing that marker are not
addressable.
"""

from __future__ import annotations

import re

from site_migrator.exceptions import InvalidChangePathError

THEME_COLOR_PATH = "theme.color"
THEME_FONT_PATH = "theme.font"

_PAGES_PREFIX = "pages."
_SECTION_RE = re.compile(r"^pages\.(?P<page>.+?)\.sections\.(?P<section>.+)$")


def page_path(page_id: str) -> str:
    return f"{_PAGES_PREFIX}{page_id}"


def section_path(page_id: str, section_id: str) -> str:
    return f"{page_path(page_id)}.sections.{section_id}"


def navigation_path(href: str) -> str:
    return f"navigation.{href}"


def parse_page_path(path: str) -> str:
    """Return the page id addressed by ``pages.<pageId>``."""
    if not path.startswith(_PAGES_PREFIX) or len(path) == len(_PAGES_PREFIX):
        raise InvalidChangePathError(path, "pages.<pageId>")
    return path[len(_PAGES_PREFIX):]


def parse_section_path(path: str) -> tuple[str, str]:
    """Return ``(page_id, section_id)`` for ``pages.<pageId>.sections.<sectionId>``."""
    m = _SECTION_RE.match(path)
    if m is None:
        raise InvalidChangePathError(path, "pages.<pageId>.sections.<sectionId>")
    return m.group("page"), m.group("section")

"""site-migrator - pull template improvements into user sites without losing their edits."""

from site_migrator.config import MigratorConfig, load_config
from site_migrator.migration import (
    ChangeCategory,
    ChangeKind,
    ChangeRecord,
    MigrationReport,
    apply_migration,
    compare,
    merge_additions,
)
from site_migrator.tree import ConfigTree, NavigationItem, Page, Section, Theme
from site_migrator.updates import UpdateCheck, UpdateResult, apply_update, check_for_update

__version__ = "0.1.0"

__all__ = [
    "ChangeCategory",
    "ChangeKind",
    "ChangeRecord",
    "ConfigTree",
    "MigrationReport",
    "MigratorConfig",
    "NavigationItem",
    "Page",
    "Section",
    "Theme",
    "UpdateCheck",
    "UpdateResult",
    "apply_migration",
    "apply_update",
    "check_for_update",
    "compare",
    "load_config",
    "merge_additions",
]

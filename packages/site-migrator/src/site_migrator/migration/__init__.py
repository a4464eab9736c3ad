"""Template migration engine: compare two config trees and merge additions."""

from site_migrator.migration.applicator import MergeResult, apply_migration, merge_additions
from site_migrator.migration.differ import CollectionDiff, diff_collections, index_by
from site_migrator.migration.models import (
    ChangeCategory,
    ChangeKind,
    ChangeRecord,
    MigrationReport,
)
from site_migrator.migration.report import compare

__all__ = [
    "ChangeCategory",
    "ChangeKind",
    "ChangeRecord",
    "CollectionDiff",
    "MergeResult",
    "MigrationReport",
    "apply_migration",
    "compare",
    "diff_collections",
    "index_by",
    "merge_additions",
]

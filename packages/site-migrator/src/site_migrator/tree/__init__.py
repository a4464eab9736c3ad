"""Site configuration tree models and file I/O."""

from site_migrator.tree.io import load_tree_file, write_tree_file
from site_migrator.tree.models import (
    ConfigTree,
    DynamicConfig,
    NavigationItem,
    Page,
    Section,
    SeoMeta,
    Theme,
)

__all__ = [
    "ConfigTree",
    "DynamicConfig",
    "NavigationItem",
    "Page",
    "Section",
    "SeoMeta",
    "Theme",
    "load_tree_file",
    "write_tree_file",
]

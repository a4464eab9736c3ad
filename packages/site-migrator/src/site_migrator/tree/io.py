"""Read and write config trees as JSON or YAML documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from site_migrator.exceptions import TreeValidationError
from site_migrator.tree.models import ConfigTree

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def load_tree_file(path: str | Path) -> ConfigTree:
    """Load a ConfigTree from a ``.json``, ``.yaml`` or ``.yml`` file.

    A document wrapping the tree under a top-level ``config`` key (the shape
    templates are stored in) is unwrapped.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise TreeValidationError(str(path), e) from e

    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            raw = yaml.safe_load(text)
        else:
            raw = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise TreeValidationError(str(path), e) from e

    if raw is None:
        raw = {}
    if isinstance(raw, dict) and isinstance(raw.get("config"), dict):
        logger.debug("Unwrapping template document in %s", path)
        raw = raw["config"]
    return ConfigTree.coerce(raw, source=str(path))


def write_tree_file(tree: ConfigTree, path: str | Path) -> Path:
    """Write *tree* to *path*, choosing YAML or JSON from the suffix."""
    path = Path(path)
    data = tree.to_dict()
    if path.suffix.lower() in _YAML_SUFFIXES:
        text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    else:
        text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    path.write_text(text, encoding="utf-8")
    return path

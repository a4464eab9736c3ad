"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import MigratorConfig

CONFIG_FILENAME = "site-migrator.yaml"

# Only these variables may be referenced as ${VAR} in a config file.
_ALLOWED_ENV_VARS = frozenset({
    "SITE_MIGRATOR_LOG_LEVEL",
    "SITE_MIGRATOR_LOG_FORMAT",
    "SITE_MIGRATOR_REPORT_FORMAT",
})

_ENV_REF_RE = re.compile(r"\$\{(\w+)\}")


def load_config(cli_path: str | None = None) -> MigratorConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    config_paths = [
        Path(cli_path) if cli_path else None,
        Path(".") / CONFIG_FILENAME,
        Path.home() / ".site-migrator" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                raw = _expand_env_vars(raw)
                return MigratorConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return MigratorConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return _ENV_REF_RE.sub(_lookup_env_var, obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


def _lookup_env_var(match: re.Match) -> str:
    name = match.group(1)
    if name not in _ALLOWED_ENV_VARS:
        raise ValueError(f"Environment variable ${{{name}}} is not allowed in config")
    value = os.environ.get(name)
    if value is None:
        raise ValueError(f"Environment variable ${{{name}}} is not set")
    return value


# Default YAML template for `site-migrator config init`
DEFAULT_CONFIG_TEMPLATE = """\
# site-migrator.yaml

# Merging
migration:
  flag_new_items: true         # mark copied pages/sections with _isNew

# Report output
report:
  format: "table"              # table | json
  show_actions: true

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""

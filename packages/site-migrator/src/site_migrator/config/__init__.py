from .loader import load_config
from .models import MigrationSettings, MigratorConfig, ReportSettings

__all__ = [
    "MigrationSettings",
    "MigratorConfig",
    "ReportSettings",
    "load_config",
]

from pydantic import BaseModel, Field
from typing import Literal


class MigrationSettings(BaseModel):
    flag_new_items: bool = True


class ReportSettings(BaseModel):
    format: Literal["table", "json"] = "table"
    show_actions: bool = True


class MigratorConfig(BaseModel):
    migration: MigrationSettings = Field(default_factory=MigrationSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"

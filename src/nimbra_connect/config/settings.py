"""Environment-driven script settings.

All values are loaded from environment variables (prefix ``NIMBRA_``) or a
``.env`` file in the working directory.  The numeric table and write
identifiers default to those of the edge element driver in production and
can be overridden per deployment.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

FailurePolicy = Literal["raise", "abort", "log"]


class TableIdSettings(BaseSettings):
    """Parameter identifiers exposed by the element driver."""

    model_config = SettingsConfigDict(
        env_prefix="NIMBRA_TABLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    input_names_table_id: int = Field(default=10002, ge=1)
    """Table holding the display names of the available inputs."""
    output_names_table_id: int = Field(default=15002, ge=1)
    """Table holding the display names of the available outputs."""
    connect_write_id: int = Field(default=15059, ge=1)
    """Two-column write (output name, input name) that performs the connect."""


class Settings(BaseSettings):
    """Top-level settings aggregator."""

    model_config = SettingsConfigDict(
        env_prefix="NIMBRA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    tables: TableIdSettings = Field(default_factory=TableIdSettings)

    failure_policy: FailurePolicy = "raise"
    """What the top-level handler does with a failed run: re-raise it, ask the
    host to abort the script, or log it and report a failed result."""

    bound_element: str = ""
    """Element used by the bound connector, which takes no element parameter."""

    not_connected_sentinel: str = "<not connected>"

    audit_enabled: bool = True
    home: Path = Path.home() / ".nimbra"
    """Root directory for persistent data (audit log)."""


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the module-level Settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the singleton so the next call re-reads the environment."""
    global _settings
    _settings = None

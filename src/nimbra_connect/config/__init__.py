"""Configuration for nimbra-connect."""

from __future__ import annotations

from nimbra_connect.config.settings import (
    FailurePolicy,
    Settings,
    TableIdSettings,
    get_settings,
    reset_settings,
)

__all__ = ["FailurePolicy", "Settings", "TableIdSettings", "get_settings", "reset_settings"]

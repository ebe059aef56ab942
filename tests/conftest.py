"""Shared test fixtures for nimbra-connect.

Provides settings pointing at a temporary home, a pre-populated in-memory
host and a mock host so individual test modules stay focused.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from nimbra_connect.config.settings import Settings, reset_settings
from nimbra_connect.connectors.registry import reset_registry
from nimbra_connect.core.types import Element
from nimbra_connect.host.base import AutomationHost
from nimbra_connect.host.memory import ElementSnapshot, HostSnapshot, InMemoryHost

INPUTS_TABLE = 10002
OUTPUTS_TABLE = 15002
CONNECT_WRITE = 15059


# ---------------------------------------------------------------------------
# Singletons
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_singletons(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep settings and the registry from leaking between tests."""
    monkeypatch.setenv("NIMBRA_HOME", str(tmp_path / "home"))
    reset_settings()
    reset_registry()
    yield
    reset_settings()
    reset_registry()


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(home=tmp_path / "home", bound_element="Edge1")


# ---------------------------------------------------------------------------
# Hosts
# ---------------------------------------------------------------------------


@pytest.fixture()
def snapshot() -> HostSnapshot:
    return HostSnapshot(
        elements=[
            ElementSnapshot(
                name="Edge1",
                element_id="12/345",
                active=True,
                tables={
                    INPUTS_TABLE: ["PortA", "PortC"],
                    OUTPUTS_TABLE: ["PortB", "PortD"],
                },
            ),
            ElementSnapshot(
                name="Edge2",
                active=False,
                tables={INPUTS_TABLE: ["PortA"], OUTPUTS_TABLE: ["PortB"]},
            ),
        ]
    )


@pytest.fixture()
def host(snapshot: HostSnapshot) -> InMemoryHost:
    return InMemoryHost(snapshot)


@pytest.fixture()
def mock_host() -> MagicMock:
    """A host whose every call can be asserted on.

    Finds any element, reports it active and knows every row.
    """
    mock = MagicMock(spec=AutomationHost)
    mock.find_element.side_effect = lambda name: Element(name=name)
    mock.is_active.return_value = True
    mock.get_parameter_display.side_effect = lambda element, table_id, key: key
    return mock

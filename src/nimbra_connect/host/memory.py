"""InMemoryHost — a self-contained host for dry runs and tests.

Elements, their activity and their name tables come from a JSON snapshot::

    {
      "elements": [
        {"name": "Edge1", "active": true,
         "tables": {"10002": ["PortA"], "15002": ["PortB"]}}
      ]
    }

Writes and information lines are recorded instead of reaching a device.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from nimbra_connect.core.types import Element
from nimbra_connect.host.base import AutomationHost, ScriptAbortedError

logger = logging.getLogger(__name__)


class ElementSnapshot(BaseModel):
    name: str
    element_id: str = ""
    active: bool = True
    tables: dict[int, list[str]] = Field(default_factory=dict)
    """Table id → row display values."""


class HostSnapshot(BaseModel):
    elements: list[ElementSnapshot] = Field(default_factory=list)


@dataclass(frozen=True)
class RecordedWrite:
    """A parameter write captured by :class:`InMemoryHost`."""

    element: str
    param_id: int
    values: tuple[Any, ...]


class InMemoryHost(AutomationHost):
    """Host backed by plain dictionaries."""

    def __init__(self, snapshot: HostSnapshot | None = None) -> None:
        self._elements: dict[str, ElementSnapshot] = {}
        self.writes: list[RecordedWrite] = []
        self.messages: list[str] = []
        self.abort_message: str | None = None
        for element in (snapshot or HostSnapshot()).elements:
            self.add_element(element)

    @classmethod
    def from_file(cls, path: Path) -> InMemoryHost:
        """Build a host from a JSON snapshot file."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        snapshot = HostSnapshot.model_validate(data)
        logger.debug("Loaded %d element(s) from %s", len(snapshot.elements), path)
        return cls(snapshot)

    def add_element(self, element: ElementSnapshot) -> None:
        self._elements[element.name] = element

    # -- AutomationHost --------------------------------------------------

    def find_element(self, name: str) -> Element | None:
        snap = self._elements.get(name)
        if snap is None:
            return None
        return Element(name=snap.name, element_id=snap.element_id)

    def is_active(self, element: Element) -> bool:
        snap = self._elements.get(element.name)
        return snap is not None and snap.active

    def get_parameter_display(self, element: Element, table_id: int, key: str) -> str | None:
        snap = self._elements.get(element.name)
        if snap is None:
            return None
        rows = snap.tables.get(table_id, [])
        return key if key in rows else None

    def set_parameter(self, element: Element, param_id: int, *values: Any) -> None:
        self.writes.append(RecordedWrite(element=element.name, param_id=param_id, values=values))

    def abort(self, message: str) -> None:
        self.abort_message = message
        raise ScriptAbortedError(message)

    def log(self, message: str) -> None:
        self.messages.append(message)

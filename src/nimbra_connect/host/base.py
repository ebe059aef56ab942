"""AutomationHost — the engine-side surface a connector talks to.

The engine owns element discovery, parameter tables and the write path to
the device.  Connectors receive a host instance explicitly; nothing reaches
for a global engine object.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from nimbra_connect.core.types import Element


class ScriptAbortedError(Exception):
    """Raised by a host whose ``abort`` halts the running script."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AutomationHost(ABC):
    """Abstract base for automation engine bindings."""

    @abstractmethod
    def find_element(self, name: str) -> Element | None:
        """Look up an element by name; ``None`` if it does not exist."""

    @abstractmethod
    def is_active(self, element: Element) -> bool:
        """Return whether *element* is currently active."""

    @abstractmethod
    def get_parameter_display(self, element: Element, table_id: int, key: str) -> str | None:
        """Return the display value of row *key* in table *table_id*.

        Returns ``None`` when the table has no such row.
        """

    @abstractmethod
    def set_parameter(self, element: Element, param_id: int, *values: Any) -> None:
        """Write *values* to parameter *param_id* of *element*."""

    @abstractmethod
    def abort(self, message: str) -> None:
        """Halt the script and surface *message* to the operator.

        Implementations normally raise :class:`ScriptAbortedError`.
        """

    @abstractmethod
    def log(self, message: str) -> None:
        """Emit an operator-visible information line."""

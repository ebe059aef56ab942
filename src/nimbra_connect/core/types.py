"""Request-scoped values passed between the host and a connector.

Nothing here outlives a single invocation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

RunState = Literal[
    "start", "element_resolved", "input_validated", "output_validated", "written", "done", "failed"
]


class TableKind(Enum):
    """The two name tables a raw parameter can be validated against."""

    INPUT_NAMES = "input_names"
    OUTPUT_NAMES = "output_names"

    @property
    def label(self) -> str:
        """Operator-facing table name."""
        return "Inputs" if self is TableKind.INPUT_NAMES else "Outputs"


@dataclass(frozen=True)
class Element:
    """Handle on a managed element as returned by the host."""

    name: str
    element_id: str = ""


@dataclass
class ConnectRequest:
    """Raw script parameters for one invocation.

    ``element_name`` is ``None`` for connectors bound to a configured element.
    """

    input_name: str
    output_name: str
    element_name: str | None = None


@dataclass
class ConnectResult:
    """Outcome of one top-level run."""

    success: bool = False
    element: str = ""
    input_name: str = ""
    output_name: str = ""
    state: RunState = "start"
    error: str = ""
    aborted: bool = False
    history: list[RunState] = field(default_factory=lambda: ["start"])

    def advance(self, state: RunState) -> None:
        self.state = state
        self.history.append(state)

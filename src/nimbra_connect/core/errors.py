"""Typed failures raised while preparing or issuing a connect.

Connectors always raise one of these; the top-level handler in
:mod:`nimbra_connect.connectors.registry` decides whether the failure is
re-raised, turned into a host abort, or only logged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nimbra_connect.core.types import TableKind


class ConnectError(Exception):
    """Base class for every connect failure.

    ``str(error)`` is the single human-readable line shown to the operator.
    """


class ElementNotFoundError(ConnectError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"The element '{name}' could not be found.")


class ElementInactiveError(ConnectError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"The element '{name}' is not active.")


class InvalidTableIdentifierError(ConnectError):
    """Raised when a table kind outside the two known tables is requested."""

    def __init__(self, table_kind: object) -> None:
        self.table_kind = table_kind
        super().__init__(
            f"Table {table_kind!r} is not recognized. Use either the input names "
            "or the output names table."
        )


class NameNotFoundError(ConnectError):
    def __init__(self, name: str, table_kind: TableKind) -> None:
        self.name = name
        self.table_kind = table_kind
        super().__init__(f"The name '{name}' is not in the {table_kind.label} table.")


class MalformedEncodingError(ConnectError):
    """A value starts with the ``["`` marker but is not a complete ``["..."]``."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Malformed parameter encoding: {raw!r}")


class WriteFailedError(ConnectError):
    def __init__(self, element: str, reason: str) -> None:
        self.element = element
        super().__init__(f"The connect write on '{element}' failed: {reason}")


class UnknownConnectorError(ConnectError):
    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        super().__init__(f"Unknown connector: {name}. Available: {available}")

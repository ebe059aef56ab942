"""BaseConnector — abstract base class for connect scripts.

A connector resolves its target element, validates the raw input and output
names against the element's name tables and issues the single connect
write.  Subclasses only decide where the element comes from.

Connectors always raise :class:`~nimbra_connect.core.errors.ConnectError`;
whether a failure aborts the script or is only logged is decided by
:func:`nimbra_connect.connectors.registry.run_connector`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from nimbra_connect.config.settings import Settings, get_settings
from nimbra_connect.core.encoding import normalize
from nimbra_connect.core.errors import (
    ElementInactiveError,
    InvalidTableIdentifierError,
    NameNotFoundError,
    WriteFailedError,
)
from nimbra_connect.core.types import ConnectRequest, ConnectResult, Element, TableKind
from nimbra_connect.host.base import AutomationHost

logger = logging.getLogger(__name__)


class BaseConnector(ABC):
    """Abstract base for connect scripts.

    Attributes
    ----------
    name:
        Short identifier (e.g. ``"connect_input"``).
    description:
        Human-readable description listed by the CLI.
    takes_element_param:
        Whether the script reads the target element from its parameters.
    """

    name: str = ""
    description: str = ""
    takes_element_param: bool = True

    def __init__(self, host: AutomationHost, settings: Settings | None = None) -> None:
        self.host = host
        self.settings = settings if settings is not None else get_settings()

    def is_available(self) -> bool:
        """Check whether the connector can run with the current settings."""
        return True

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    @abstractmethod
    def resolve_element(self, raw_name: str | None) -> Element:
        """Return the active element the write goes to."""

    def ensure_active(self, element: Element) -> Element:
        if not self.host.is_active(element):
            raise ElementInactiveError(element.name)
        return element

    def _table_id(self, table_kind: TableKind) -> int:
        tables = self.settings.tables
        if table_kind is TableKind.INPUT_NAMES:
            return tables.input_names_table_id
        if table_kind is TableKind.OUTPUT_NAMES:
            return tables.output_names_table_id
        raise InvalidTableIdentifierError(table_kind)

    def validate_name(self, element: Element, raw: str, table_kind: TableKind) -> str:
        """Normalize *raw* and check it is a row of the *table_kind* table.

        The disconnect sentinel is accepted as an input name without a
        lookup.
        """
        table_id = self._table_id(table_kind)
        value = normalize(raw)

        if table_kind is TableKind.INPUT_NAMES and value == self.settings.not_connected_sentinel:
            logger.debug("Input is the disconnect sentinel, skipping lookup")
            return value

        if self.host.get_parameter_display(element, table_id, value) is None:
            raise NameNotFoundError(value, table_kind)
        return value

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def run(self, request: ConnectRequest, result: ConnectResult | None = None) -> ConnectResult:
        """Execute one connect.

        Parameters
        ----------
        request:
            Raw script parameters.
        result:
            Result to fill in.  Passing one lets the caller see how far the
            run got when an error is raised.

        Returns
        -------
        ConnectResult
            The successful result; failures are raised.
        """
        result = result if result is not None else ConnectResult()

        element = self.resolve_element(request.element_name)
        result.element = element.name
        result.advance("element_resolved")

        input_name = self.validate_name(element, request.input_name, TableKind.INPUT_NAMES)
        result.input_name = input_name
        result.advance("input_validated")

        output_name = self.validate_name(element, request.output_name, TableKind.OUTPUT_NAMES)
        result.output_name = output_name
        result.advance("output_validated")

        message = f"Connecting input '{input_name}' to output '{output_name}' on {element.name}"
        logger.info(message)
        self.host.log(message)

        write_id = self.settings.tables.connect_write_id
        try:
            self.host.set_parameter(element, write_id, output_name, input_name)
        except Exception as exc:
            raise WriteFailedError(element.name, str(exc)) from exc
        result.advance("written")

        result.success = True
        result.advance("done")
        return result

    def to_schema(self) -> dict[str, Any]:
        """Return a JSON-serialisable description for listings."""
        return {
            "name": self.name,
            "description": self.description,
            "takes_element_param": self.takes_element_param,
            "available": self.is_available(),
        }

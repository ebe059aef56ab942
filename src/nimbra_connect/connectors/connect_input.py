"""Connect-input scripts.

Two flavours exist in the field:

* ``connect_input`` takes the element name as a script parameter.
* ``connect_input_bound`` always targets the element configured in
  ``NIMBRA_BOUND_ELEMENT`` and only takes the input and output names.
"""

from __future__ import annotations

import logging

from nimbra_connect.connectors.base import BaseConnector
from nimbra_connect.core.encoding import normalize
from nimbra_connect.core.errors import ElementNotFoundError
from nimbra_connect.core.types import Element

logger = logging.getLogger(__name__)


class ConnectInputConnector(BaseConnector):
    """Connect an input to an output on a named element."""

    name = "connect_input"
    description = "Route an input to an output on the element given in the parameters."
    takes_element_param = True

    def resolve_element(self, raw_name: str | None) -> Element:
        element_name = normalize(raw_name or "")
        if not element_name:
            raise ElementNotFoundError(element_name)

        element = self.host.find_element(element_name)
        if element is None:
            raise ElementNotFoundError(element_name)
        logger.debug("Resolved element %s", element_name)
        return self.ensure_active(element)


class BoundConnectInputConnector(BaseConnector):
    """Connect an input to an output on the configured element."""

    name = "connect_input_bound"
    description = "Route an input to an output on the preconfigured element."
    takes_element_param = False

    def is_available(self) -> bool:
        return bool(self.settings.bound_element)

    def resolve_element(self, raw_name: str | None) -> Element:
        if raw_name:
            logger.warning("Ignoring element parameter %r, connector is bound", raw_name)

        element = self.host.find_element(self.settings.bound_element)
        if element is None:
            raise ElementNotFoundError(self.settings.bound_element)
        return self.ensure_active(element)

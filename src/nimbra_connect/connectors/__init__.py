"""Connect scripts run against an automation host.

Every module in this package (except ``base`` and ``registry``) may define
:class:`~nimbra_connect.connectors.base.BaseConnector` subclasses; the
registry picks them up automatically.
"""

from __future__ import annotations

"""Connector Registry — discover connectors and run them under a failure policy.

:func:`get_registry` lazily imports every
:class:`~nimbra_connect.connectors.base.BaseConnector` subclass from the
``nimbra_connect.connectors`` package and exposes the classes keyed by
connector name.  :func:`run_connector` is the single place where a failed
run is turned into a re-raised error, a host abort, or a log line.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil

from nimbra_connect.config.settings import FailurePolicy, Settings, get_settings
from nimbra_connect.connectors.base import BaseConnector
from nimbra_connect.core.errors import ConnectError, UnknownConnectorError
from nimbra_connect.core.types import ConnectRequest, ConnectResult
from nimbra_connect.host.base import AutomationHost
from nimbra_connect.security.audit import record_connect

logger = logging.getLogger(__name__)

_registry: dict[str, type[BaseConnector]] | None = None


def _discover_connectors() -> dict[str, type[BaseConnector]]:
    """Import all modules in ``nimbra_connect.connectors`` and collect subclasses."""
    import nimbra_connect.connectors as pkg

    registry: dict[str, type[BaseConnector]] = {}

    for _finder, mod_name, _is_pkg in pkgutil.iter_modules(pkg.__path__):
        if mod_name in ("base", "registry", "__init__"):
            continue
        module = importlib.import_module(f"nimbra_connect.connectors.{mod_name}")
        for _attr_name, obj in inspect.getmembers(module, inspect.isclass):
            if (
                issubclass(obj, BaseConnector)
                and obj is not BaseConnector
                and not inspect.isabstract(obj)
            ):
                registry[obj.name] = obj

    return registry


def get_registry() -> dict[str, type[BaseConnector]]:
    """Return the connector registry (lazily discovered)."""
    global _registry
    if _registry is None:
        _registry = _discover_connectors()
    return _registry


def reset_registry() -> None:
    """Force re-discovery on next :func:`get_registry` call."""
    global _registry
    _registry = None


def create_connector(
    name: str, host: AutomationHost, settings: Settings | None = None
) -> BaseConnector:
    reg = get_registry()
    cls = reg.get(name)
    if cls is None:
        raise UnknownConnectorError(name, sorted(reg))
    return cls(host, settings)


def run_connector(
    name: str,
    host: AutomationHost,
    request: ConnectRequest,
    *,
    settings: Settings | None = None,
    policy: FailurePolicy | None = None,
) -> ConnectResult:
    """Run a connector by name and apply the failure policy.

    ``raise`` re-raises the :class:`ConnectError`; ``abort`` hands the
    message to ``host.abort``; ``log`` reports it through ``host.log`` and
    returns the failed result.  Errors that are not a
    :class:`ConnectError` always propagate.  Every finished run is
    journaled before the policy is applied.
    """
    settings = settings if settings is not None else get_settings()
    policy = policy or settings.failure_policy
    result = ConnectResult()

    try:
        connector = create_connector(name, host, settings)
        connector.run(request, result)
    except ConnectError as exc:
        message = str(exc)
        result.error = message
        result.advance("failed")
        record_connect(settings, name, request, result)

        if policy == "raise":
            raise
        if policy == "abort":
            logger.error("Aborting %s: %s", name, message)
            result.aborted = True
            host.abort(message)
            return result

        logger.error("%s failed: %s", name, message)
        host.log(f"Connect failed: {message}")
        return result

    record_connect(settings, name, request, result)
    return result

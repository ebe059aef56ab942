"""Automation engine bindings.

A connector never talks to the engine directly; it is handed an
:class:`~nimbra_connect.host.base.AutomationHost`.
"""

from __future__ import annotations

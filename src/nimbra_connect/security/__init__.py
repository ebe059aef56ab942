"""Audit trail for connect writes."""

from __future__ import annotations

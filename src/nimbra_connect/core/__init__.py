"""Core types, errors and parameter encoding."""

from __future__ import annotations

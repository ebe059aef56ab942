"""Bracket/quote wrapping used by the engine for script parameters.

Values picked from a drop-down in the engine arrive as ``["name"]``; values
typed by hand arrive bare.  :func:`normalize` maps both to the bare name.
"""

from __future__ import annotations

from nimbra_connect.core.errors import MalformedEncodingError

_PREFIX = '["'
_SUFFIX = '"]'


def is_encoded(raw: str) -> bool:
    """Return ``True`` if *raw* carries the ``["`` marker."""
    return raw.startswith(_PREFIX)


def normalize(raw: str) -> str:
    """Strip the ``["..."]`` wrapping from *raw*.

    Strings without the leading marker are returned unchanged.  A string
    with the marker but without a closing ``"]`` (including ``["`` and
    ``["]``) raises :class:`MalformedEncodingError` instead of being cut
    at a guessed position.
    """
    if not is_encoded(raw):
        return raw
    if len(raw) < len(_PREFIX) + len(_SUFFIX) or not raw.endswith(_SUFFIX):
        raise MalformedEncodingError(raw)
    return raw[len(_PREFIX) : -len(_SUFFIX)]

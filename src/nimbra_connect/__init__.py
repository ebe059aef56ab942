"""nimbra-connect — connect a named input to a named output on an edge element.

Validates the raw script parameters handed over by the automation engine
against the element's input and output name tables, then issues the single
connect write.
"""

from __future__ import annotations

__version__ = "1.0.0"

__all__ = ["__version__"]

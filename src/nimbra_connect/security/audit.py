"""Connect journal — one tamper-evident line per connect attempt.

Each run through the registry appends a :class:`ConnectRecord` to
``<home>/audit/connects.jsonl``.  Every record carries the SHA-256 of its
own content plus the digest of the record before it, so editing or removing
a line breaks the chain from that point on.

The journal never gets in the way of a connect: failing to create or write
the file is logged and the run carries on.
"""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import asdict, dataclass, fields, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from nimbra_connect.config.settings import Settings
    from nimbra_connect.core.types import ConnectRequest, ConnectResult

logger = logging.getLogger(__name__)

Outcome = Literal["connected", "failed"]

_ROOT_DIGEST = "0" * 64


@dataclass(frozen=True)
class ConnectRecord:
    """What was asked for, what was written, and how it ended."""

    timestamp: str
    connector: str
    outcome: Outcome
    element: str
    input_name: str
    output_name: str
    error: str = ""
    previous: str = _ROOT_DIGEST
    digest: str = ""

    def content_digest(self) -> str:
        body = {k: v for k, v in asdict(self).items() if k != "digest"}
        return hashlib.sha256(json.dumps(body, sort_keys=True).encode()).hexdigest()

    @classmethod
    def from_result(
        cls, connector: str, request: ConnectRequest, result: ConnectResult
    ) -> ConnectRecord:
        """Build an unchained record; raw request values fill in whatever the run never validated."""
        return cls(
            timestamp=datetime.now(timezone.utc).isoformat(),
            connector=connector,
            outcome="connected" if result.success else "failed",
            element=result.element or (request.element_name or ""),
            input_name=result.input_name or request.input_name,
            output_name=result.output_name or request.output_name,
            error=result.error,
        )


class ConnectJournal:
    """Append-only JSONL file of :class:`ConnectRecord` lines."""

    def __init__(self, path: Path) -> None:
        self.path = path

    @classmethod
    def for_settings(cls, settings: Settings) -> ConnectJournal:
        return cls(settings.home / "audit" / "connects.jsonl")

    def records(self) -> list[ConnectRecord]:
        if not self.path.exists():
            return []
        names = {f.name for f in fields(ConnectRecord)}
        lines = self.path.read_text(encoding="utf-8").splitlines()
        return [
            ConnectRecord(**{k: v for k, v in json.loads(line).items() if k in names})
            for line in lines
            if line.strip()
        ]

    def append(self, record: ConnectRecord) -> ConnectRecord:
        """Chain *record* onto the last line and write it.

        Raises :class:`OSError` if the file cannot be created or written and
        :class:`ValueError` if an existing line is not a record.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        existing = self.records()
        previous = existing[-1].digest if existing else _ROOT_DIGEST
        chained = replace(record, previous=previous, digest="")
        chained = replace(chained, digest=chained.content_digest())
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(asdict(chained), ensure_ascii=False) + "\n")
        return chained

    def verify(self) -> tuple[bool, int]:
        """Walk the chain; return ``(intact, number of records checked)``."""
        try:
            records = self.records()
        except (ValueError, TypeError) as exc:
            logger.error("Connect journal unreadable: %s", exc)
            return False, 0
        previous = _ROOT_DIGEST
        checked = 0
        for record in records:
            if record.previous != previous or record.digest != record.content_digest():
                logger.error("Connect journal broken at record %d (%s)", checked, record.timestamp)
                return False, checked
            previous = record.digest
            checked += 1
        return True, checked


def record_connect(
    settings: Settings, connector: str, request: ConnectRequest, result: ConnectResult
) -> ConnectRecord | None:
    """Journal one finished run under ``settings.home``.

    Returns ``None`` when journaling is disabled or the file is unusable.
    """
    if not settings.audit_enabled:
        return None
    journal = ConnectJournal.for_settings(settings)
    try:
        return journal.append(ConnectRecord.from_result(connector, request, result))
    except (OSError, ValueError, TypeError) as exc:
        logger.error("Could not journal %s run to %s: %s", connector, journal.path, exc)
        return None

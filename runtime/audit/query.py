"""Read side of the UFT audit log.

Plain functions over a JSONL file path, used by the CLI ``logs``
command, the HTTP audit endpoints and the metrics aggregation.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from contracts.audit import AuditEntry, AuditEvent


def query_by_request(log_path: str | Path, request_id: str) -> list[AuditEntry]:
    """Entries sharing one request id: a tool call or one keyword test run."""
    return [e for e in _read_all(log_path) if e.request_id == request_id]


def query_by_event(
    log_path: str | Path, event: AuditEvent, limit: int = 100
) -> list[AuditEntry]:
    """The newest *limit* entries of one event kind, oldest first."""
    return [e for e in _read_all(log_path) if e.event == event][-limit:]


def tail(log_path: str | Path, n: int = 20) -> list[AuditEntry]:
    return _read_all(log_path)[-n:]


def query_filtered(
    log_path: str | Path,
    *,
    event: AuditEvent | None = None,
    tool: str | None = None,
    since: datetime | None = None,
    until: datetime | None = None,
    request_id: str | None = None,
    limit: int = 100,
    offset: int = 0,
) -> tuple[list[AuditEntry], int]:
    """One page of matching entries, newest first, and the match count.

    ``tool`` matches the tool name recorded by the dispatcher; keyword
    and lifecycle entries never match it.
    """

    def matches(e: AuditEntry) -> bool:
        return (
            (event is None or e.event == event)
            and (tool is None or e.detail.get("tool") == tool)
            and (request_id is None or e.request_id == request_id)
            and (since is None or e.ts >= since)
            and (until is None or e.ts <= until)
        )

    hits = sorted(
        (e for e in _read_all(log_path) if matches(e)),
        key=lambda e: e.ts,
        reverse=True,
    )
    return hits[offset : offset + limit], len(hits)


def _read_all(log_path: str | Path) -> list[AuditEntry]:
    path = Path(log_path)
    if not path.exists():
        return []
    with path.open("r", encoding="utf-8") as f:
        return [AuditEntry(**json.loads(line)) for line in f if line.strip()]

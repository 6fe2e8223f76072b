"""JSONL audit log shared by the tool dispatcher and the keyword extension."""

from __future__ import annotations

import threading
from pathlib import Path

from contracts.audit import AuditEntry, AuditEvent, AuditLogger
from runtime.audit import query


class JsonlAuditLogger(AuditLogger):
    """Appends one JSON line per entry; writes are serialised by a lock."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._path

    def log(self, entry: AuditEntry) -> None:
        # A failed dump writes nothing.
        line = entry.model_dump_json() + "\n"
        with self._lock, self._path.open("a", encoding="utf-8") as f:
            f.write(line)

    def query_by_request(self, request_id: str) -> list[AuditEntry]:
        return query.query_by_request(self._path, request_id)

    def query_by_event(self, event: AuditEvent, limit: int = 100) -> list[AuditEntry]:
        return query.query_by_event(self._path, event, limit=limit)

    def tail(self, n: int = 20) -> list[AuditEntry]:
        return query.tail(self._path, n=n)

"""Audit records for tool dispatches and keyword test runs.

Tool events share the dispatcher's request id.  Keyword and lifecycle
events share the run id of the extension's test-run session.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class AuditEvent(str, Enum):
    TOOL_CALL = "tool.call"
    TOOL_RESULT = "tool.result"
    TOOL_ERROR = "tool.error"
    KEYWORD_CALL = "keyword.call"
    TEST_START = "test.start"
    TEST_END = "test.end"


class AuditEntry(BaseModel):
    ts: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    request_id: str
    event: AuditEvent
    app: str = ""
    # tool: tool, arguments, status, duration_ms, transport, kind, message
    # keyword: keyword, success
    detail: dict[str, Any] = Field(default_factory=dict)


class AuditLogger(ABC):
    """Sink for audit entries plus the queries the runtime needs back."""

    @abstractmethod
    def log(self, entry: AuditEntry) -> None:
        ...

    @abstractmethod
    def query_by_request(self, request_id: str) -> list[AuditEntry]:
        ...

    @abstractmethod
    def query_by_event(self, event: AuditEvent, limit: int = 100) -> list[AuditEntry]:
        """Newest *limit* entries of *event*, oldest first."""
        ...

    @abstractmethod
    def tail(self, n: int = 20) -> list[AuditEntry]:
        ...

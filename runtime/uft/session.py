"""Test-run session: owns the context slot shared by MCP keywords."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

EMPTY_CONTEXT: dict[str, str] = {"id": "none", "type": "empty"}


class TestRunSession:
    """One UFT test run.

    Holds at most one context value.  The last ``set_context`` wins and
    ``start`` clears it; nothing is persisted between runs.
    """

    __test__ = False  # not a pytest class

    def __init__(self) -> None:
        self.run_id = str(uuid.uuid4())
        self.started_at: datetime | None = None
        self.ended_at: datetime | None = None
        self._context: Any = None

    @property
    def active(self) -> bool:
        return self.started_at is not None and self.ended_at is None

    @property
    def has_context(self) -> bool:
        return self._context is not None

    def start(self) -> None:
        self.run_id = str(uuid.uuid4())
        self.started_at = datetime.now(timezone.utc)
        self.ended_at = None
        self._context = None

    def end(self) -> None:
        self.ended_at = datetime.now(timezone.utc)

    def set_context(self, value: Any) -> None:
        if not value:
            raise ValueError("context must be a non-empty value")
        self._context = value

    def get_context(self) -> Any:
        """The stored context, or a fresh copy of the empty sentinel."""
        if self._context is None:
            return dict(EMPTY_CONTEXT)
        return self._context

"""In-memory UFT host.

Implements the host contract outside a real UFT process: keywords are
kept in a dict, reports in a list, and test start/end are fired by
hand.  Used by the CLI and the tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from contracts.host import KeywordArgs, KeywordImpl, LifecycleCallback, ReportStatus, UftHost


@dataclass
class HostReport:
    status: ReportStatus
    title: str
    details: str


class InMemoryUftHost(UftHost):
    def __init__(self) -> None:
        self.keywords: dict[str, KeywordImpl] = {}
        self.reports: list[HostReport] = []
        self._start_listeners: list[LifecycleCallback] = []
        self._end_listeners: list[LifecycleCallback] = []

    def register(self, name: str, implementation: KeywordImpl) -> None:
        self.keywords[name] = implementation

    def report(self, status: ReportStatus, title: str, details: str) -> None:
        self.reports.append(HostReport(status=status, title=title, details=details))

    def on_test_start(self, callback: LifecycleCallback) -> None:
        self._start_listeners.append(callback)

    def on_test_end(self, callback: LifecycleCallback) -> None:
        self._end_listeners.append(callback)

    # ── host-side driving ───────────────────────────────────────────

    def start_test(self) -> None:
        for callback in self._start_listeners:
            callback()

    def end_test(self) -> None:
        for callback in self._end_listeners:
            callback()

    def call(self, name: str, args: KeywordArgs = None) -> dict[str, Any]:
        """Invoke a registered keyword as a test step would.

        Raises ``KeyError`` for an unregistered keyword.
        """
        return self.keywords[name](args)

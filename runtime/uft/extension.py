"""UFT MCP extension: registers MCP keywords in a UFT host.

The extension owns the test-run session: the context slot is cleared on
every host test-start event.  When an audit logger is supplied each
keyword call and lifecycle event is appended to the audit log.
"""

from __future__ import annotations

from typing import Any

from contracts.audit import AuditEntry, AuditEvent, AuditLogger
from contracts.host import KeywordArgs, KeywordImpl, ReportStatus, UftHost
from runtime.uft.keywords import McpKeywords
from runtime.uft.session import TestRunSession

EXTENSION_VERSION = "0.1.0"


class McpExtension:
    """Keyword adapter between a UFT host and the MCP keyword set."""

    version = EXTENSION_VERSION

    def __init__(
        self,
        host: UftHost,
        session: TestRunSession | None = None,
        logger: AuditLogger | None = None,
        app_name: str = "uft-mcp-extension",
    ) -> None:
        self.host = host
        self.session = session or TestRunSession()
        self.keywords = McpKeywords(host, self.session)
        self.initialized = False
        self.registered: set[str] = set()
        self._handlers_attached = False
        self._logger = logger
        self._app_name = app_name

    def init(self) -> None:
        """Register keywords and lifecycle handlers.

        Idempotent.  A keyword the host refuses is reported and skipped;
        the next ``init`` call retries only the keywords still missing.
        """
        if self.initialized:
            return
        failed = self.register_keywords()
        if not self._handlers_attached:
            self.setup_event_handlers()
        self.initialized = not failed

        if failed:
            self.host.report(
                ReportStatus.WARNING,
                "MCP Extension Partially Initialized",
                f"Version: {self.version}; not registered: {', '.join(failed)}",
            )
            return
        self.host.report(
            ReportStatus.DONE, "MCP Extension Initialized", f"Version: {self.version}"
        )

    def register_keywords(self) -> list[str]:
        """Register every keyword not yet registered; return the names that failed."""
        failed: list[str] = []
        for name, implementation in self.keywords.implementations().items():
            if name in self.registered:
                continue
            try:
                self.host.register(name, self._audited(name, implementation))
            except Exception as exc:
                failed.append(name)
                self.host.report(ReportStatus.FAILED, f"Failed to register {name}", str(exc))
                continue
            self.registered.add(name)
        return failed

    def setup_event_handlers(self) -> None:
        self.host.on_test_start(self._on_test_start)
        self.host.on_test_end(self._on_test_end)
        self._handlers_attached = True

    # ── lifecycle ───────────────────────────────────────────────────

    def _on_test_start(self) -> None:
        self.session.start()
        self._log(AuditEvent.TEST_START, {})

    def _on_test_end(self) -> None:
        self.session.end()
        self._log(AuditEvent.TEST_END, {})

    # ── internal ────────────────────────────────────────────────────

    def _audited(self, name: str, implementation: KeywordImpl) -> KeywordImpl:
        if self._logger is None:
            return implementation

        def keyword(args: KeywordArgs = None) -> dict[str, Any]:
            result = implementation(args)
            self._log(AuditEvent.KEYWORD_CALL, {
                "keyword": name,
                "success": bool(result.get("success")),
            })
            return result

        return keyword

    def _log(self, event: AuditEvent, detail: dict[str, Any]) -> None:
        if self._logger is None:
            return
        self._logger.log(AuditEntry(
            request_id=self.session.run_id,
            event=event,
            app=self._app_name,
            detail=detail,
        ))

"""Tool dispatcher: validate, run, and normalise a single tool call.

Every outcome leaves as a ToolResult; validation and handler failures
become ``{"status": "error", "message": ...}`` and are never raised to
the transport.
"""

from __future__ import annotations

import sys
import time
import uuid
from typing import Any

from contracts.audit import AuditEntry, AuditEvent, AuditLogger
from contracts.manifest import ValidationMode
from contracts.tool_sdk import (
    HandlerError,
    ToolContext,
    ToolDefinition,
    ToolResult,
    ToolValidationError,
    UnknownToolError,
)

from runtime.tools.base import normalize_args, validate_args
from runtime.tools.registry import ToolRegistry


class ToolDispatcher:
    """Routes invocations by exact tool name against the registry."""

    def __init__(
        self,
        registry: ToolRegistry,
        *,
        validation_mode: ValidationMode = ValidationMode.STRICT,
        logger: AuditLogger | None = None,
        app_name: str = "",
        redact_arguments: bool = False,
    ) -> None:
        self._registry = registry
        self._mode = validation_mode
        self._logger = logger
        self._app_name = app_name
        self._redact = redact_arguments

    @property
    def validation_mode(self) -> ValidationMode:
        return self._mode

    def list_tools(self) -> list[ToolDefinition]:
        """Return the full catalog, in declaration order."""
        return self._registry.definitions()

    def validate(self, name: str, args: Any) -> dict[str, Any]:
        """Check *args* for tool *name* and return them as a mapping.

        Raises ``UnknownToolError`` or ``ToolValidationError``.
        """
        if name not in self._registry:
            raise UnknownToolError(name)
        arguments = normalize_args(args)
        validate_args(self._registry.get(name).definition(), arguments, self._mode)
        return arguments

    async def dispatch(self, name: str, args: Any, *, transport: str = "direct") -> ToolResult:
        """Validate and execute one invocation."""
        request_id = str(uuid.uuid4())
        self._log(request_id, AuditEvent.TOOL_CALL, {
            "tool": name,
            "arguments": self._loggable(args),
            "transport": transport,
        })

        started = time.perf_counter()
        kind = ""
        try:
            arguments = self.validate(name, args)
            ctx = ToolContext(request_id=request_id, app_name=self._app_name, transport=transport)
            result = await self._registry.get(name).run(ctx, arguments)
        except ToolValidationError as exc:
            kind = "validation"
            result = ToolResult.error(str(exc))
        except HandlerError as exc:
            kind = "handler"
            result = ToolResult.error(str(exc))
        except Exception as exc:
            kind = "handler"
            result = ToolResult.error(str(exc) or type(exc).__name__)
        duration_ms = round((time.perf_counter() - started) * 1000, 3)

        detail: dict[str, Any] = {
            "tool": name,
            "status": result.status.value,
            "duration_ms": duration_ms,
            "transport": transport,
        }
        if result.success:
            self._log(request_id, AuditEvent.TOOL_RESULT, detail)
        else:
            detail["kind"] = kind or "handler"
            detail["message"] = result.message
            self._log(request_id, AuditEvent.TOOL_ERROR, detail)
        return result

    async def invoke(self, name: str, args: Any, *, transport: str = "direct") -> str:
        """Dispatch and serialise the result to a JSON string."""
        result = await self.dispatch(name, args, transport=transport)
        return result.to_json()

    # ── internal ────────────────────────────────────────────────────

    def _loggable(self, args: Any) -> Any:
        if self._redact and isinstance(args, dict):
            return sorted(args)
        return args

    def _log(self, request_id: str, event: AuditEvent, detail: dict[str, Any]) -> None:
        if self._logger is None:
            return
        # A failed audit write never changes the result of the call.
        try:
            self._logger.log(AuditEntry(
                request_id=request_id,
                event=event,
                app=self._app_name,
                detail=detail,
            ))
        except (OSError, ValueError) as exc:
            print(f"Audit write failed ({event.value}): {exc}", file=sys.stderr)

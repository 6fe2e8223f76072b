"""MCP keywords exposed to UFT test scripts.

Every keyword reports to the host and returns ``{"success": bool, ...}``.
None of them touches the network or the file system: MCP_SendRequest
and MCP_ExecutePrompt only describe the request they would make.
"""

from __future__ import annotations

import json
import uuid
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from contracts.host import KeywordArgs, KeywordImpl, ReportStatus, UftHost
from runtime.uft.session import TestRunSession


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _details(data: Any) -> str:
    return json.dumps(data, default=str)


def _mapping(args: KeywordArgs) -> Mapping[str, Any]:
    """Keyword arguments as a mapping; anything else counts as no arguments."""
    return args if isinstance(args, Mapping) else {}


class McpKeywords:
    """Keyword implementations bound to one host and one session."""

    def __init__(self, host: UftHost, session: TestRunSession) -> None:
        self._host = host
        self._session = session

    def implementations(self) -> dict[str, KeywordImpl]:
        """Keyword name → callable, in registration order."""
        return {
            "MCP_Ping": self.ping,
            "MCP_SendRequest": self.send_request,
            "MCP_ValidateResponse": self.validate_response,
            "MCP_SetContext": self.set_context,
            "MCP_GetContext": self.get_context,
            "MCP_ExecutePrompt": self.execute_prompt,
        }

    # ── keywords ────────────────────────────────────────────────────

    def ping(self, args: KeywordArgs = None) -> dict[str, Any]:
        """Connectivity check; echoes the arguments back to the report."""
        args = _mapping(args)
        timestamp = _timestamp()
        message = args.get("message") or "Ping successful"
        self._host.report(ReportStatus.DONE, "MCP_Ping", _details({
            "message": message,
            "timestamp": timestamp,
            "args": dict(args) or None,
        }))
        return {"success": True, "timestamp": timestamp}

    def send_request(self, args: KeywordArgs = None) -> dict[str, Any]:
        args = _mapping(args)
        if not args.get("endpoint"):
            return self._fail("MCP_SendRequest", "endpoint")
        request = {
            "endpoint": args["endpoint"],
            "method": str(args.get("method") or "POST").upper(),
            "data": args.get("data") or {},
            "timestamp": _timestamp(),
        }
        self._host.report(ReportStatus.DONE, "MCP_SendRequest", _details(request))
        return {"success": True, "requestId": uuid.uuid4().hex[:9], "request": request}

    def validate_response(self, args: KeywordArgs = None) -> dict[str, Any]:
        """Check an MCP response mapping for a usable, non-error status."""
        args = _mapping(args)
        if args.get("response") is None:
            return self._fail("MCP_ValidateResponse", "response")
        response = args["response"]
        errors: list[str] = []
        warnings: list[str] = []

        status = response.get("status") if isinstance(response, Mapping) else None
        if not status:
            errors.append("Missing status field")
        else:
            code = _status_code(status)
            if code is None:
                warnings.append(f"Non-numeric status: {status}")
            elif code >= 400:
                errors.append(f"Error status code: {status}")

        result = {"isValid": not errors, "errors": errors, "warnings": warnings}
        self._host.report(
            ReportStatus.DONE if result["isValid"] else ReportStatus.WARNING,
            "MCP_ValidateResponse",
            _details(result),
        )
        return {"success": True, **result}

    def set_context(self, args: KeywordArgs = None) -> dict[str, Any]:
        args = _mapping(args)
        if not args.get("context"):
            return self._fail("MCP_SetContext", "context")
        context = args["context"]
        self._session.set_context(context)

        fields = context if isinstance(context, Mapping) else {}
        self._host.report(ReportStatus.DONE, "MCP_SetContext", _details({
            "contextId": fields.get("id") or "default",
            "contextType": fields.get("type") or "unknown",
            "timestamp": _timestamp(),
        }))
        return {"success": True, "context": context}

    def get_context(self, args: KeywordArgs = None) -> dict[str, Any]:
        context = self._session.get_context()
        self._host.report(ReportStatus.DONE, "MCP_GetContext", _details(context))
        return {"success": True, "context": context}

    def execute_prompt(self, args: KeywordArgs = None) -> dict[str, Any]:
        """Describe a prompt execution against the current context."""
        args = _mapping(args)
        if not args.get("prompt"):
            return self._fail("MCP_ExecutePrompt", "prompt")
        execution = {
            "prompt": args["prompt"],
            "parameters": args.get("parameters") or {},
            "context": self._session.get_context() if self._session.has_context else {},
            "timestamp": _timestamp(),
            "executionId": uuid.uuid4().hex[:9],
        }
        self._host.report(ReportStatus.DONE, "MCP_ExecutePrompt", _details(execution))
        return {
            "success": True,
            "executionId": execution["executionId"],
            "result": {
                "output": "Prompt executed successfully",
                "metadata": execution,
            },
        }

    # ── internal ────────────────────────────────────────────────────

    def _fail(self, keyword: str, name: str) -> dict[str, Any]:
        """Report a missing required parameter and return the failure result."""
        self._host.report(
            ReportStatus.FAILED, keyword, f"Missing required parameter: {name}"
        )
        return {"success": False, "error": f"Missing {name}"}


def _status_code(status: Any) -> int | None:
    if isinstance(status, bool):
        return None
    if isinstance(status, (int, float)):
        return int(status)
    if isinstance(status, str) and status.strip().isdigit():
        return int(status.strip())
    return None

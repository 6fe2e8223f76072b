"""Built-in debug_test_failure tool."""

from __future__ import annotations

from typing import Any

from contracts.backends import FailureDebugger
from contracts.tool_sdk import BaseTool, ToolContext, ToolDefinition, ToolResult
from contracts.uft import DebugTestFailureRequest
from runtime.tools.base import parse_request
from runtime.tools.catalog import CATALOG


class DebugTestFailureTool(BaseTool):
    """Ask the FailureDebugger for likely causes of a failed run."""

    def __init__(self, debugger: FailureDebugger) -> None:
        self._debugger = debugger

    def definition(self) -> ToolDefinition:
        return CATALOG["debug_test_failure"]

    async def run(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        request = parse_request(DebugTestFailureRequest, args)
        diagnosis = await self._debugger.diagnose(request)
        count = diagnosis.issues_found
        return ToolResult.ok(
            f"Failure analysis complete with {count} suggestions",
            testPath=request.failed_test_path,
            issuesFound=count,
            suggestions=diagnosis.suggestions,
        )

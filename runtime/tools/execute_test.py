"""Built-in execute_uft_test tool: run a test through the TestExecutor."""

from __future__ import annotations

from typing import Any

from contracts.backends import TestExecutor
from contracts.tool_sdk import BaseTool, ToolContext, ToolDefinition, ToolResult
from contracts.uft import ExecuteUftTestRequest
from runtime.tools.base import parse_request
from runtime.tools.catalog import CATALOG


class ExecuteUftTestTool(BaseTool):
    def __init__(self, executor: TestExecutor) -> None:
        self._executor = executor

    def definition(self) -> ToolDefinition:
        return CATALOG["execute_uft_test"]

    async def run(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        request = parse_request(ExecuteUftTestRequest, args)
        report = await self._executor.execute(request)
        fields: dict[str, Any] = {
            "testPath": request.test_path,
            "executionTime": report.execution_time,
            "passed": report.passed,
            "failed": report.failed,
            "warnings": report.warnings,
        }
        if request.result_path:
            fields["resultPath"] = request.result_path
        return ToolResult.ok("Test execution completed", **fields)

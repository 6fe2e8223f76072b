"""Built-in create_test_suite tool."""

from __future__ import annotations

from typing import Any

from contracts.tool_sdk import BaseTool, ToolContext, ToolDefinition, ToolResult
from contracts.uft import CreateTestSuiteRequest
from runtime.tools.base import parse_request
from runtime.tools.catalog import CATALOG


class CreateTestSuiteTool(BaseTool):
    """Group test paths into a named suite with an execution order."""

    def definition(self) -> ToolDefinition:
        return CATALOG["create_test_suite"]

    async def run(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        request = parse_request(CreateTestSuiteRequest, args)
        count = len(request.tests)
        return ToolResult.ok(
            f"Test suite '{request.suite_name}' created with {count} tests",
            suiteName=request.suite_name,
            testsIncluded=count,
            executionOrder=request.execution_order.value,
        )

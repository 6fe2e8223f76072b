"""Built-in generate_test_data tool."""

from __future__ import annotations

from typing import Any

from contracts.tool_sdk import BaseTool, ToolContext, ToolDefinition, ToolResult
from contracts.uft import GenerateTestDataRequest
from runtime.tools.base import parse_request
from runtime.tools.catalog import CATALOG


class GenerateTestDataTool(BaseTool):
    """Report a data-driven test table.  No file is written."""

    def definition(self) -> ToolDefinition:
        return CATALOG["generate_test_data"]

    async def run(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        request = parse_request(GenerateTestDataRequest, args)
        data_type = request.data_type.value
        return ToolResult.ok(
            f"Generated {request.record_count} {data_type} records",
            dataType=data_type,
            recordsGenerated=request.record_count,
            outputPath=request.output_path or f"generated_data.{data_type}",
        )

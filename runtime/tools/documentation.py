"""Built-in generate_test_documentation tool."""

from __future__ import annotations

from typing import Any

from contracts.tool_sdk import BaseTool, ToolContext, ToolDefinition, ToolResult
from contracts.uft import GenerateTestDocumentationRequest
from runtime.tools.base import parse_request
from runtime.tools.catalog import CATALOG


class GenerateTestDocumentationTool(BaseTool):
    def definition(self) -> ToolDefinition:
        return CATALOG["generate_test_documentation"]

    async def run(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        request = parse_request(GenerateTestDocumentationRequest, args)
        doc_type = request.documentation_type.value
        return ToolResult.ok(
            f"{doc_type} documentation generated",
            testPath=request.test_path,
            documentationType=doc_type,
            outputFormat=request.output_format.value,
            includeScreenshots=request.include_screenshots,
        )

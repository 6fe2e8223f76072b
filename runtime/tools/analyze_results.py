"""Built-in analyze_test_results tool."""

from __future__ import annotations

from typing import Any

from contracts.backends import ResultAnalyzer
from contracts.tool_sdk import BaseTool, ToolContext, ToolDefinition, ToolResult
from contracts.uft import AnalyzeTestResultsRequest
from runtime.tools.base import parse_request
from runtime.tools.catalog import CATALOG


class AnalyzeTestResultsTool(BaseTool):
    """Summarise a UFT results folder in the requested report format."""

    def __init__(self, analyzer: ResultAnalyzer) -> None:
        self._analyzer = analyzer

    def definition(self) -> ToolDefinition:
        return CATALOG["analyze_test_results"]

    async def run(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        request = parse_request(AnalyzeTestResultsRequest, args)
        summary = await self._analyzer.analyze(request)
        return ToolResult.ok(
            "Analysis complete",
            resultPath=request.result_path,
            format=request.report_format.value,
            summary={
                "totalTests": summary.total_tests,
                "passed": summary.passed,
                "failed": summary.failed,
                "passRate": summary.pass_rate,
            },
        )

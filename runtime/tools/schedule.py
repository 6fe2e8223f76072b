"""Built-in schedule_test_execution tool."""

from __future__ import annotations

from typing import Any

from contracts.tool_sdk import BaseTool, ToolContext, ToolDefinition, ToolResult
from contracts.uft import ScheduleTestExecutionRequest
from runtime.tools.base import parse_request
from runtime.tools.catalog import CATALOG


class ScheduleTestExecutionTool(BaseTool):
    """Acknowledge a schedule.  Nothing is queued."""

    def definition(self) -> ToolDefinition:
        return CATALOG["schedule_test_execution"]

    async def run(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        request = parse_request(ScheduleTestExecutionRequest, args)
        schedule = request.schedule
        fields: dict[str, Any] = {
            "testOrSuite": request.test_or_suite,
            "scheduleType": schedule.type.value,
            "scheduledTime": schedule.time,
        }
        if schedule.date:
            fields["scheduledDate"] = schedule.date
        return ToolResult.ok(
            f"Test scheduled for {schedule.type.value} execution at {schedule.time}",
            **fields,
        )

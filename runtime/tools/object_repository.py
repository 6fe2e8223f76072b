"""Built-in manage_object_repository tool."""

from __future__ import annotations

from typing import Any

from contracts.tool_sdk import BaseTool, ToolContext, ToolDefinition, ToolResult
from contracts.uft import ManageObjectRepositoryRequest
from runtime.tools.base import parse_request
from runtime.tools.catalog import CATALOG


class ManageObjectRepositoryTool(BaseTool):
    """Acknowledge an Object Repository operation.  The repository file is not touched."""

    def definition(self) -> ToolDefinition:
        return CATALOG["manage_object_repository"]

    async def run(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        request = parse_request(ManageObjectRepositoryRequest, args)
        action = request.action.value
        return ToolResult.ok(
            f"Object repository {action} operation completed",
            action=action,
            objectName=request.object_name or "N/A",
        )

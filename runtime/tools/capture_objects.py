"""Built-in capture_application_objects tool."""

from __future__ import annotations

from typing import Any

from contracts.backends import ObjectCapturer
from contracts.tool_sdk import BaseTool, ToolContext, ToolDefinition, ToolResult
from contracts.uft import CaptureApplicationObjectsRequest
from runtime.tools.base import parse_request
from runtime.tools.catalog import CATALOG


class CaptureApplicationObjectsTool(BaseTool):
    def __init__(self, capturer: ObjectCapturer) -> None:
        self._capturer = capturer

    def definition(self) -> ToolDefinition:
        return CATALOG["capture_application_objects"]

    async def run(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        request = parse_request(CaptureApplicationObjectsRequest, args)
        report = await self._capturer.capture(request)
        fields: dict[str, Any] = {
            "application": request.application_path,
            "captureMode": request.capture_mode.value,
            "objectsCaptured": report.objects_captured,
        }
        if request.output_repository:
            fields["outputRepository"] = request.output_repository
        return ToolResult.ok("Application objects captured successfully", **fields)

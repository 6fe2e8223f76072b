"""Tool registry: register, look-up, and export UFT tools."""

from __future__ import annotations

from contracts.backends import FailureDebugger, ObjectCapturer, ResultAnalyzer, TestExecutor
from contracts.tool_sdk import BaseTool, ToolDefinition


class ToolRegistry:
    """In-memory registry of available tools, kept in registration order."""

    def __init__(self) -> None:
        self._tools: dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        """Register a tool instance.  Overwrites if name already exists."""
        name = tool.definition().name
        self._tools[name] = tool

    def get(self, name: str) -> BaseTool:
        """Return a registered tool by name, or raise ``KeyError``."""
        return self._tools[name]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def list_tools(self) -> list[str]:
        return list(self._tools)

    def definitions(self) -> list[ToolDefinition]:
        """Catalog entries of every registered tool."""
        return [tool.definition() for tool in self._tools.values()]


def create_default_registry(
    executor: TestExecutor | None = None,
    analyzer: ResultAnalyzer | None = None,
    capturer: ObjectCapturer | None = None,
    debugger: FailureDebugger | None = None,
) -> ToolRegistry:
    """Create a registry pre-loaded with all ten UFT tools.

    Backends not supplied fall back to a shared ``SimulatedUftBackend``.
    """
    from runtime.backends.simulated import SimulatedUftBackend
    from runtime.tools.analyze_results import AnalyzeTestResultsTool
    from runtime.tools.capture_objects import CaptureApplicationObjectsTool
    from runtime.tools.create_test import CreateUftTestTool
    from runtime.tools.data_generation import GenerateTestDataTool
    from runtime.tools.debug_failure import DebugTestFailureTool
    from runtime.tools.documentation import GenerateTestDocumentationTool
    from runtime.tools.execute_test import ExecuteUftTestTool
    from runtime.tools.object_repository import ManageObjectRepositoryTool
    from runtime.tools.schedule import ScheduleTestExecutionTool
    from runtime.tools.suite import CreateTestSuiteTool

    simulated = SimulatedUftBackend()

    registry = ToolRegistry()
    registry.register(CreateUftTestTool())
    registry.register(ExecuteUftTestTool(executor or simulated))
    registry.register(AnalyzeTestResultsTool(analyzer or simulated))
    registry.register(ManageObjectRepositoryTool())
    registry.register(GenerateTestDataTool())
    registry.register(CaptureApplicationObjectsTool(capturer or simulated))
    registry.register(CreateTestSuiteTool())
    registry.register(ScheduleTestExecutionTool())
    registry.register(GenerateTestDocumentationTool())
    registry.register(DebugTestFailureTool(debugger or simulated))
    return registry

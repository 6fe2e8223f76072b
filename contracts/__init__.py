"""Shared contracts: source of truth for all UFT MCP interfaces."""

from contracts.manifest import Manifest, AppInfo, AuditConfig, ServerConfig, ValidationConfig, ValidationMode
from contracts.tool_sdk import (
    BaseTool,
    HandlerError,
    ResultStatus,
    ToolContext,
    ToolDefinition,
    ToolError,
    ToolResult,
    ToolValidationError,
    UnknownToolError,
)
from contracts.audit import AuditEntry, AuditEvent, AuditLogger
from contracts.backends import FailureDebugger, ObjectCapturer, ResultAnalyzer, TestExecutor
from contracts.host import ReportStatus, UftHost

__all__ = [
    # manifest
    "Manifest",
    "AppInfo",
    "AuditConfig",
    "ServerConfig",
    "ValidationConfig",
    "ValidationMode",
    # tool sdk
    "BaseTool",
    "HandlerError",
    "ResultStatus",
    "ToolContext",
    "ToolDefinition",
    "ToolError",
    "ToolResult",
    "ToolValidationError",
    "UnknownToolError",
    # audit
    "AuditEntry",
    "AuditEvent",
    "AuditLogger",
    # backends
    "FailureDebugger",
    "ObjectCapturer",
    "ResultAnalyzer",
    "TestExecutor",
    # host
    "ReportStatus",
    "UftHost",
]

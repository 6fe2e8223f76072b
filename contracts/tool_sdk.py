"""Tool SDK contracts.

Every UFT tool implements BaseTool.  The dispatcher validates inputs,
executes the tool, and converts every outcome into a ToolResult.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


# ── Errors ───────────────────────────────────────────────────────────


class ToolError(Exception):
    """Base class for failures caught at the dispatch boundary."""


class ToolValidationError(ToolError):
    """Arguments were rejected before the handler ran."""


class UnknownToolError(ToolValidationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class HandlerError(ToolError):
    """A handler could not compute its result."""


# ── Data models ──────────────────────────────────────────────────────


class ToolDefinition(BaseModel):
    """MCP-compatible description of a tool."""

    name: str
    description: str
    input_schema: dict[str, Any]   # JSON Schema

    @property
    def required(self) -> list[str]:
        return list(self.input_schema.get("required", []))


class ResultStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class ToolResult(BaseModel):
    """Uniform result shape.  Serialized as one flat JSON object."""

    status: ResultStatus
    message: str
    payload: dict[str, Any] = {}

    @classmethod
    def ok(cls, message: str, **fields: Any) -> ToolResult:
        return cls(status=ResultStatus.SUCCESS, message=message, payload=fields)

    @classmethod
    def error(cls, message: str) -> ToolResult:
        return cls(status=ResultStatus.ERROR, message=message)

    @property
    def success(self) -> bool:
        return self.status == ResultStatus.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"status": self.status.value}
        data.update(
            (k, v) for k, v in self.payload.items() if k not in ("status", "message")
        )
        data["message"] = self.message
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)


# ── Context passed to every tool invocation ──────────────────────────


@dataclass
class ToolContext:
    """Runtime context supplied to a tool's run() method."""

    request_id: str
    app_name: str = ""
    transport: str = "direct"


# ── Abstract base class ─────────────────────────────────────────────


class BaseTool(ABC):
    """Abstract base class that every UFT tool must implement."""

    @abstractmethod
    def definition(self) -> ToolDefinition:
        """Return the tool's catalog entry."""
        ...

    @abstractmethod
    async def run(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        """Execute the tool. Called by the dispatcher after validation."""
        ...

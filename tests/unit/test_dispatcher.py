"""Unit tests for the tool dispatcher: validation, routing, error shaping."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from contracts.audit import AuditEvent
from contracts.manifest import ValidationMode
from contracts.tool_sdk import (
    BaseTool,
    ToolContext,
    ToolDefinition,
    ToolResult,
    ToolValidationError,
    UnknownToolError,
)
from runtime.audit.logger import JsonlAuditLogger
from runtime.dispatcher import ToolDispatcher
from runtime.tools.registry import ToolRegistry, create_default_registry


VALID_ARGS: dict[str, dict[str, Any]] = {
    "create_uft_test": {
        "testName": "LoginTest",
        "actions": [{"type": "click", "object": "Btn", "description": "click"}],
    },
    "execute_uft_test": {"testPath": "C:/tests/LoginTest"},
    "analyze_test_results": {"resultPath": "C:/results/LoginTest"},
    "manage_object_repository": {"action": "add", "objectName": "LoginButton"},
    "generate_test_data": {"dataType": "csv", "schema": {"user": "string"}, "recordCount": 25},
    "capture_application_objects": {"applicationPath": "https://example.test/login"},
    "create_test_suite": {"suiteName": "Smoke", "tests": ["C:/tests/A", "C:/tests/B"]},
    "schedule_test_execution": {
        "testOrSuite": "Smoke",
        "schedule": {"type": "daily", "time": "02:30"},
    },
    "generate_test_documentation": {"testPath": "C:/tests/A", "documentationType": "summary"},
    "debug_test_failure": {"failedTestPath": "C:/tests/A"},
}

REQUIRED_CASES = [
    (tool, field)
    for tool, args in VALID_ARGS.items()
    for field in create_default_registry().get(tool).definition().required
]


def _dispatcher(
    mode: ValidationMode = ValidationMode.STRICT,
    logger: JsonlAuditLogger | None = None,
    redact: bool = False,
) -> ToolDispatcher:
    return ToolDispatcher(
        create_default_registry(),
        validation_mode=mode,
        logger=logger,
        app_name="test-app",
        redact_arguments=redact,
    )


class ExplodingTool(BaseTool):
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="explode",
            description="Always fails.",
            input_schema={"type": "object", "properties": {}, "required": []},
        )

    async def run(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        raise RuntimeError("backend unavailable")


# ── catalog ─────────────────────────────────────────────────────────


class TestListTools:
    def test_returns_full_catalog(self) -> None:
        names = [d.name for d in _dispatcher().list_tools()]
        assert names == list(VALID_ARGS)

    def test_has_no_side_effects(self, tmp_path: Path) -> None:
        logger = JsonlAuditLogger(tmp_path / "audit.jsonl")
        _dispatcher(logger=logger).list_tools()
        assert logger.tail() == []


# ── validate ────────────────────────────────────────────────────────


class TestValidate:
    def test_unknown_tool(self) -> None:
        with pytest.raises(UnknownToolError, match="Unknown tool: nope"):
            _dispatcher().validate("nope", {})

    def test_returns_arguments(self) -> None:
        args = VALID_ARGS["execute_uft_test"]
        assert _dispatcher().validate("execute_uft_test", args) == args

    def test_missing_required(self) -> None:
        with pytest.raises(ToolValidationError, match="testName"):
            _dispatcher().validate("create_uft_test", {"actions": []})


# ── dispatch ────────────────────────────────────────────────────────


class TestDispatch:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("mode", list(ValidationMode))
    @pytest.mark.parametrize("tool", list(VALID_ARGS))
    async def test_every_tool_succeeds(self, tool: str, mode: ValidationMode) -> None:
        raw = await _dispatcher(mode).invoke(tool, copy.deepcopy(VALID_ARGS[tool]))
        data = json.loads(raw)
        assert data["status"] == "success", data
        assert data["message"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("mode", list(ValidationMode))
    @pytest.mark.parametrize("tool,field", REQUIRED_CASES)
    async def test_missing_required_field(self, tool: str, field: str, mode: ValidationMode) -> None:
        args = copy.deepcopy(VALID_ARGS[tool])
        del args[field]
        data = json.loads(await _dispatcher(mode).invoke(tool, args))
        assert data["status"] == "error"
        assert field in data["message"]

    @pytest.mark.asyncio
    async def test_unknown_tool(self) -> None:
        data = json.loads(await _dispatcher().invoke("delete_everything", {}))
        assert data == {"status": "error", "message": "Unknown tool: delete_everything"}

    @pytest.mark.asyncio
    async def test_none_arguments(self) -> None:
        data = json.loads(await _dispatcher().invoke("execute_uft_test", None))
        assert data["status"] == "error"
        assert "testPath" in data["message"]

    @pytest.mark.asyncio
    async def test_non_object_arguments(self) -> None:
        data = json.loads(await _dispatcher().invoke("execute_uft_test", "C:/tests/A"))
        assert data["status"] == "error"
        assert "must be an object" in data["message"]

    @pytest.mark.asyncio
    async def test_shallow_mode_handler_rejects_enum(self) -> None:
        args = {"resultPath": "r", "reportFormat": "pdf"}
        data = json.loads(await _dispatcher(ValidationMode.SHALLOW).invoke("analyze_test_results", args))
        assert data["status"] == "error"
        assert "reportFormat" in data["message"]

    @pytest.mark.asyncio
    async def test_shallow_mode_handler_rejects_nested_missing(self) -> None:
        args = {"testOrSuite": "Smoke", "schedule": {"type": "daily"}}
        data = json.loads(await _dispatcher(ValidationMode.SHALLOW).invoke("schedule_test_execution", args))
        assert data["status"] == "error"
        assert data["message"] == "Missing required field: schedule.time"

    @pytest.mark.asyncio
    async def test_strict_mode_rejects_enum_before_dispatch(self) -> None:
        args = {"resultPath": "r", "reportFormat": "pdf"}
        data = json.loads(await _dispatcher().invoke("analyze_test_results", args))
        assert data["status"] == "error"
        assert "'pdf' is not one of" in data["message"]

    @pytest.mark.asyncio
    async def test_handler_exception_becomes_error_result(self) -> None:
        registry = ToolRegistry()
        registry.register(ExplodingTool())
        dispatcher = ToolDispatcher(registry)
        data = json.loads(await dispatcher.invoke("explode", {}))
        assert data == {"status": "error", "message": "backend unavailable"}


# ── worked examples ─────────────────────────────────────────────────


class TestExamples:
    @pytest.mark.asyncio
    async def test_create_login_test(self) -> None:
        data = json.loads(await _dispatcher().invoke("create_uft_test", VALID_ARGS["create_uft_test"]))
        assert data["status"] == "success"
        assert data["actions"] == 1
        assert "LoginTest" in data["testScript"]

    @pytest.mark.asyncio
    async def test_query_repository_without_object(self) -> None:
        data = json.loads(await _dispatcher().invoke("manage_object_repository", {"action": "query"}))
        assert data["status"] == "success"
        assert data["objectName"] == "N/A"

    @pytest.mark.asyncio
    async def test_defaults_applied(self) -> None:
        d = _dispatcher()
        analysis = (await d.dispatch("analyze_test_results", {"resultPath": "r"})).to_dict()
        assert analysis["format"] == "summary"
        assert analysis["summary"]["passRate"] == "80%"

        data = (await d.dispatch("generate_test_data", VALID_ARGS["generate_test_data"])).to_dict()
        assert data["outputPath"] == "generated_data.csv"
        assert data["message"] == "Generated 25 csv records"

        capture = (await d.dispatch("capture_application_objects", {"applicationPath": "app.exe"})).to_dict()
        assert capture["captureMode"] == "automatic"
        assert capture["objectsCaptured"] == 15

        suite = (await d.dispatch("create_test_suite", VALID_ARGS["create_test_suite"])).to_dict()
        assert suite["executionOrder"] == "sequential"
        assert suite["message"] == "Test suite 'Smoke' created with 2 tests"

        docs = (await d.dispatch("generate_test_documentation", VALID_ARGS["generate_test_documentation"])).to_dict()
        assert docs["outputFormat"] == "html"
        assert docs["message"] == "summary documentation generated"

        schedule = (await d.dispatch("schedule_test_execution", VALID_ARGS["schedule_test_execution"])).to_dict()
        assert schedule["message"] == "Test scheduled for daily execution at 02:30"


# ── audit logging ───────────────────────────────────────────────────


class TestDispatchAudit:
    @pytest.mark.asyncio
    async def test_success_logs_call_and_result(self, tmp_path: Path) -> None:
        logger = JsonlAuditLogger(tmp_path / "audit.jsonl")
        await _dispatcher(logger=logger).dispatch("execute_uft_test", {"testPath": "A"}, transport="mcp")

        entries = logger.tail()
        assert [e.event for e in entries] == [AuditEvent.TOOL_CALL, AuditEvent.TOOL_RESULT]
        assert entries[0].request_id == entries[1].request_id
        assert entries[0].detail["arguments"] == {"testPath": "A"}
        assert entries[1].detail["status"] == "success"
        assert entries[1].detail["transport"] == "mcp"
        assert "duration_ms" in entries[1].detail

    @pytest.mark.asyncio
    async def test_validation_error_logged_with_kind(self, tmp_path: Path) -> None:
        logger = JsonlAuditLogger(tmp_path / "audit.jsonl")
        await _dispatcher(logger=logger).dispatch("execute_uft_test", {})

        errors = logger.query_by_event(AuditEvent.TOOL_ERROR)
        assert len(errors) == 1
        assert errors[0].detail["kind"] == "validation"
        assert errors[0].detail["message"] == "Missing required field: testPath"

    @pytest.mark.asyncio
    async def test_handler_error_logged_with_kind(self, tmp_path: Path) -> None:
        logger = JsonlAuditLogger(tmp_path / "audit.jsonl")
        dispatcher = _dispatcher(ValidationMode.SHALLOW, logger=logger)
        await dispatcher.dispatch("manage_object_repository", {"action": "rename"})

        errors = logger.query_by_event(AuditEvent.TOOL_ERROR)
        assert errors[0].detail["kind"] == "handler"

    @pytest.mark.asyncio
    async def test_redacted_arguments(self, tmp_path: Path) -> None:
        logger = JsonlAuditLogger(tmp_path / "audit.jsonl")
        args = {"testPath": "secret/path", "parameters": {"password": "hunter2"}}
        await _dispatcher(logger=logger, redact=True).dispatch("execute_uft_test", args)

        call = logger.query_by_event(AuditEvent.TOOL_CALL)[0]
        assert call.detail["arguments"] == ["parameters", "testPath"]
        assert "hunter2" not in (tmp_path / "audit.jsonl").read_text()

    @pytest.mark.asyncio
    async def test_unwritable_audit_log_keeps_result(self, tmp_path: Path) -> None:
        log_path = tmp_path / "audit.jsonl"
        log_path.mkdir()
        logger = JsonlAuditLogger(log_path)

        data = json.loads(await _dispatcher(logger=logger).invoke("execute_uft_test", {"testPath": "A"}))
        assert data["status"] == "success"

        data = json.loads(await _dispatcher(logger=logger).invoke("execute_uft_test", {}))
        assert data == {"status": "error", "message": "Missing required field: testPath"}

    @pytest.mark.asyncio
    async def test_unserializable_arguments_still_dispatch(self, tmp_path: Path) -> None:
        logger = JsonlAuditLogger(tmp_path / "audit.jsonl")
        args = {"testPath": "A", "parameters": {"handle": object()}}

        result = await _dispatcher(ValidationMode.SHALLOW, logger=logger).dispatch("execute_uft_test", args)
        assert result.success
        assert [e.event for e in logger.tail()] == [AuditEvent.TOOL_RESULT]

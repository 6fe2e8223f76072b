"""Unit tests for the UFT MCP server."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator

import pytest

from contracts.audit import AuditEvent
from contracts.manifest import AuditConfig, Manifest, ValidationConfig, ValidationMode
from runtime import mcp_server as mod
from runtime.mcp_helpers import UftComponents, build_components, init_components
from runtime.mcp_server import _run_tool, call_tool, list_tools, server


# ── helpers ────────────────────────────────────────────────────────────


def _make_manifest(tmp_path: Path, mode: ValidationMode = ValidationMode.STRICT) -> Manifest:
    return Manifest(
        validation=ValidationConfig(mode=mode),
        audit=AuditConfig(path=str(tmp_path / "test_audit.jsonl")),
    )


@pytest.fixture()
def components(tmp_path: Path) -> Iterator[UftComponents]:
    c = build_components(_make_manifest(tmp_path))
    mod._components = c
    try:
        yield c
    finally:
        mod._components = None


# ── tool listing ──────────────────────────────────────────────────────


class TestMcpToolListing:
    def test_server_name(self) -> None:
        assert server.name == "uft-mcp-server"

    @pytest.mark.asyncio
    async def test_all_ten_tools_listed(self, components: UftComponents) -> None:
        tools = await list_tools()
        assert len(tools) == 10
        assert tools[0].name == "create_uft_test"
        assert tools[-1].name == "debug_test_failure"

    @pytest.mark.asyncio
    async def test_schemas_are_verbatim(self, components: UftComponents) -> None:
        tools = {t.name: t for t in await list_tools()}
        for definition in components.registry.definitions():
            assert tools[definition.name].inputSchema == definition.input_schema
            assert tools[definition.name].description == definition.description


# ── tool calls ────────────────────────────────────────────────────────


class TestMcpToolCalls:
    @pytest.mark.asyncio
    async def test_call_returns_single_text_item(self, components: UftComponents) -> None:
        content = await call_tool("execute_uft_test", {"testPath": "C:/tests/Login"})
        assert len(content) == 1
        assert content[0].type == "text"
        data = json.loads(content[0].text)
        assert data["status"] == "success"
        assert data["testPath"] == "C:/tests/Login"

    @pytest.mark.asyncio
    async def test_invalid_arguments_use_error_shape(self, components: UftComponents) -> None:
        content = await call_tool("create_uft_test", {"actions": []})
        data = json.loads(content[0].text)
        assert data == {"status": "error", "message": "Missing required field: testName"}

    @pytest.mark.asyncio
    async def test_unknown_tool(self, components: UftComponents) -> None:
        data = json.loads(await _run_tool("run_everything", {}))
        assert data["message"] == "Unknown tool: run_everything"

    @pytest.mark.asyncio
    async def test_none_arguments(self, components: UftComponents) -> None:
        data = json.loads(await _run_tool("manage_object_repository", None))
        assert data["status"] == "error"
        assert "action" in data["message"]

    @pytest.mark.asyncio
    async def test_calls_are_audited_with_mcp_transport(self, components: UftComponents) -> None:
        await _run_tool("debug_test_failure", {"failedTestPath": "C:/tests/A"})
        entries = components.logger.tail()
        assert [e.event for e in entries] == [AuditEvent.TOOL_CALL, AuditEvent.TOOL_RESULT]
        for e in entries:
            assert e.detail["transport"] == "mcp"
            assert e.detail["tool"] == "debug_test_failure"


# ── mcp_helpers ────────────────────────────────────────────────────────


class TestMcpHelpers:
    def test_init_components_loads_manifest(self, tmp_path: Path) -> None:
        manifest_file = tmp_path / "uftmcp.yaml"
        manifest_file.write_text(
            "app:\n  name: helper-test\n"
            "validation:\n  mode: shallow\n"
            f"audit:\n  path: {tmp_path / 'a.jsonl'}\n"
        )

        c = init_components(str(manifest_file))
        assert c.manifest.app.name == "helper-test"
        assert c.dispatcher.validation_mode == ValidationMode.SHALLOW
        assert "create_uft_test" in c.registry.list_tools()
        assert c.logger.path == tmp_path / "a.jsonl"

    def test_init_components_uses_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        manifest_file = tmp_path / "env.yaml"
        manifest_file.write_text(f"app:\n  name: from-env\naudit:\n  path: {tmp_path / 'b.jsonl'}\n")
        monkeypatch.setenv("UFTMCP_MANIFEST", str(manifest_file))

        assert init_components().manifest.app.name == "from-env"

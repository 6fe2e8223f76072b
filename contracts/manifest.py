"""Manifest (uftmcp.yaml) schema: Pydantic models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


# ── Top-level sections ──────────────────────────────────────────────


class AppInfo(BaseModel):
    name: str = "uft-mcp-server"
    version: str = "1.0.0"


class ValidationMode(str, Enum):
    STRICT = "strict"      # full JSON Schema check before dispatch
    SHALLOW = "shallow"    # required top-level fields only


class ValidationConfig(BaseModel):
    mode: ValidationMode = ValidationMode.STRICT


# ── Audit ────────────────────────────────────────────────────────────


class AuditConfig(BaseModel):
    path: str = "audit.jsonl"
    redact_arguments: bool = False


# ── HTTP runtime ─────────────────────────────────────────────────────


class ServerConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8080


# ── Root manifest ────────────────────────────────────────────────────


class Manifest(BaseModel):
    app: AppInfo = AppInfo()
    validation: ValidationConfig = ValidationConfig()
    audit: AuditConfig = AuditConfig()
    server: ServerConfig = ServerConfig()

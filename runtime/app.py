"""UFT MCP FastAPI runtime server.

HTTP surface over the same catalog and dispatcher the MCP server uses,
plus audit log queries and metrics.
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, AsyncIterator

from fastapi import Body, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from contracts.audit import AuditEntry, AuditEvent

from runtime.audit.query import _read_all, query_filtered
from runtime.mcp_helpers import UftComponents, init_components
from runtime.metrics import compute_metrics

# ── Module-level state (set during lifespan) ─────────────────────────

_components: UftComponents | None = None
_start_time: float = 0.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialise all components on startup."""
    global _components, _start_time  # noqa: PLW0603

    _start_time = time.time()
    _components = init_components()

    yield

    _components = None


app = FastAPI(title="UFT MCP Runtime", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_methods=["*"],
    allow_headers=["*"],
)


def _require_components() -> UftComponents:
    if _components is None:
        raise HTTPException(status_code=503, detail="Runtime not initialised")
    return _components


# ── Endpoints ────────────────────────────────────────────────────────


@app.get("/v1/uft/health")
async def health() -> dict[str, Any]:
    """Extended health-check endpoint."""
    result: dict[str, Any] = {"status": "ok", "version": app.version}
    result["uptime_seconds"] = round(time.time() - _start_time, 1) if _start_time else 0

    if _components is not None:
        manifest = _components.manifest
        result["manifest"] = {
            "app": manifest.app.name,
            "app_version": manifest.app.version,
            "validation_mode": manifest.validation.mode.value,
            "tools": _components.registry.list_tools(),
        }
        log_path = Path(manifest.audit.path)
        if log_path.exists():
            result["audit_log_size_bytes"] = log_path.stat().st_size
            result["audit_log_entries"] = len(_read_all(log_path))

    return result


@app.get("/v1/tools")
async def list_tools() -> dict[str, Any]:
    """The tool catalog, verbatim."""
    c = _require_components()
    return {"tools": [d.model_dump() for d in c.dispatcher.list_tools()]}


@app.post("/v1/tools/{name}")
async def call_tool(name: str, arguments: Any = Body(None)) -> dict[str, Any]:
    """Invoke a tool.  Failures are reported in the body, not the status code."""
    c = _require_components()
    result = await c.dispatcher.dispatch(name, arguments, transport="http")
    return result.to_dict()


@app.get("/v1/uft/audit/logs")
async def audit_logs(
    event: AuditEvent | None = Query(None),
    tool: str | None = Query(None),
    since: datetime | None = Query(None),
    until: datetime | None = Query(None),
    request_id: str | None = Query(None),
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
) -> dict[str, Any]:
    """Filtered, paginated audit log query."""
    c = _require_components()
    entries, total = query_filtered(
        c.manifest.audit.path,
        event=event,
        tool=tool,
        since=since,
        until=until,
        request_id=request_id,
        limit=limit,
        offset=offset,
    )
    return {"entries": [e.model_dump(mode="json") for e in entries], "total": total}


@app.get("/v1/uft/audit/{request_id}")
async def audit_query(request_id: str) -> list[AuditEntry]:
    """Return audit entries for a given request_id."""
    return _require_components().logger.query_by_request(request_id)


@app.get("/v1/uft/metrics")
async def metrics(
    since: datetime | None = Query(None),
    window: int = Query(60, ge=1, le=3600, description="Bucket window in seconds"),
) -> dict[str, Any]:
    """Aggregated observability metrics."""
    c = _require_components()
    return compute_metrics(c.manifest.audit.path, since=since, window_seconds=window)

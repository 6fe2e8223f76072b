"""Metrics aggregation for the UFT MCP server.

Computes throughput, latency percentiles, tool and keyword usage, and
error rates from the audit log.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path
from typing import Any

from contracts.audit import AuditEntry, AuditEvent
from runtime.audit.query import _read_all

_OUTCOME_EVENTS = (AuditEvent.TOOL_RESULT, AuditEvent.TOOL_ERROR)


def compute_metrics(
    log_path: str | Path,
    *,
    since: datetime | None = None,
    window_seconds: int = 60,
) -> dict[str, Any]:
    """Compute aggregated metrics from the audit log."""
    entries = _read_all(log_path)
    if since:
        entries = [e for e in entries if e.ts >= since]

    return {
        "throughput": _throughput_buckets(entries, window_seconds),
        "latency": _latency_percentiles(entries),
        "tool_usage": _usage(entries, AuditEvent.TOOL_CALL, "tool"),
        "keyword_usage": _usage(entries, AuditEvent.KEYWORD_CALL, "keyword"),
        "error_rates": _error_rates(entries),
        "summary": _summary(entries),
    }


def _throughput_buckets(
    entries: list[AuditEntry], window_seconds: int
) -> list[dict[str, Any]]:
    """Bucket tool.call events into time windows."""
    calls = [e for e in entries if e.event == AuditEvent.TOOL_CALL]
    if not calls:
        return []

    calls.sort(key=lambda e: e.ts)
    bucket_start = calls[0].ts
    last_ts = calls[-1].ts
    buckets: list[dict[str, Any]] = []

    while bucket_start <= last_ts:
        bucket_end = bucket_start + timedelta(seconds=window_seconds)
        count = sum(1 for e in calls if bucket_start <= e.ts < bucket_end)
        buckets.append({
            "time": bucket_start.isoformat(),
            "count": count,
        })
        bucket_start = bucket_end

    return buckets


def _latency_percentiles(entries: list[AuditEntry]) -> dict[str, Any]:
    """p50/p95/p99 of the dispatcher-recorded durations, in milliseconds."""
    durations = sorted(
        float(e.detail["duration_ms"])
        for e in entries
        if e.event in _OUTCOME_EVENTS and "duration_ms" in e.detail
    )
    if not durations:
        return {"p50": 0, "p95": 0, "p99": 0, "count": 0}

    n = len(durations)
    return {
        "p50": round(durations[int(n * 0.50)], 3),
        "p95": round(durations[int(min(n * 0.95, n - 1))], 3),
        "p99": round(durations[int(min(n * 0.99, n - 1))], 3),
        "count": n,
    }


def _usage(entries: list[AuditEntry], event: AuditEvent, key: str) -> list[dict[str, Any]]:
    """Count events by the name stored under *key* in the detail."""
    counts: dict[str, int] = {}
    for e in entries:
        if e.event == event:
            name = e.detail.get(key, "unknown")
            counts[name] = counts.get(name, 0) + 1

    return [{key: name, "count": c} for name, c in sorted(counts.items(), key=lambda x: -x[1])]


def _error_rates(entries: list[AuditEntry]) -> dict[str, Any]:
    tool_calls = sum(1 for e in entries if e.event == AuditEvent.TOOL_CALL)
    errors = [e for e in entries if e.event == AuditEvent.TOOL_ERROR]
    validation_errors = sum(1 for e in errors if e.detail.get("kind") == "validation")

    return {
        "tool_calls": tool_calls,
        "tool_errors": len(errors),
        "validation_errors": validation_errors,
        "handler_errors": len(errors) - validation_errors,
        "error_rate": round(len(errors) / max(tool_calls, 1), 4),
    }


def _summary(entries: list[AuditEntry]) -> dict[str, Any]:
    """High-level summary stats."""
    if not entries:
        return {"total_entries": 0, "first_entry": None, "last_entry": None}

    sorted_entries = sorted(entries, key=lambda e: e.ts)
    event_counts: dict[str, int] = {}
    for e in entries:
        event_counts[e.event.value] = event_counts.get(e.event.value, 0) + 1

    return {
        "total_entries": len(entries),
        "first_entry": sorted_entries[0].ts.isoformat(),
        "last_entry": sorted_entries[-1].ts.isoformat(),
        "event_counts": event_counts,
    }

"""uftmcp CLI: validate config, call tools and keywords, run servers, query audit logs."""

from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from pathlib import Path
from typing import Any


def _load_json_args(raw: str | None) -> Any:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        print(f"Error: --args is not valid JSON: {exc}", file=sys.stderr)
        sys.exit(1)


def cmd_validate(args: argparse.Namespace) -> None:
    """Validate a uftmcp.yaml manifest."""
    from runtime.manifest_loader import load_manifest

    path = args.manifest
    try:
        manifest = load_manifest(path)
    except FileNotFoundError:
        print(f"Error: manifest not found: {path}", file=sys.stderr)
        sys.exit(1)
    except Exception as exc:
        print(f"Error: invalid manifest: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Manifest OK: {manifest.app.name} v{manifest.app.version}")
    print(f"  Validation:   {manifest.validation.mode.value}")
    print(f"  Audit path:   {manifest.audit.path}")
    print(f"  Redact args:  {'yes' if manifest.audit.redact_arguments else 'no'}")
    print(f"  HTTP bind:    {manifest.server.host}:{manifest.server.port}")


def cmd_tools(args: argparse.Namespace) -> None:
    """List the tool catalog."""
    from runtime.tools.registry import create_default_registry

    definitions = create_default_registry().definitions()
    if args.json:
        print(json.dumps([d.model_dump() for d in definitions], indent=2))
        return
    for d in definitions:
        required = ", ".join(d.required) or "-"
        print(f"{d.name:30s}  required: {required}")
        print(f"{'':30s}  {d.description}")


def cmd_call(args: argparse.Namespace) -> None:
    """Invoke one tool through the dispatcher and print the JSON result."""
    from runtime.mcp_helpers import init_components

    arguments = _load_json_args(args.args)
    try:
        components = init_components(args.manifest)
    except Exception as exc:
        print(f"Error loading manifest: {exc}", file=sys.stderr)
        sys.exit(1)

    result = asyncio.run(
        components.dispatcher.dispatch(args.tool, arguments, transport="cli")
    )
    print(json.dumps(result.to_dict(), indent=2))
    if not result.success:
        sys.exit(2)


def cmd_keyword(args: argparse.Namespace) -> None:
    """Run keywords through an in-memory UFT host and print the host reports."""
    from runtime.uft.extension import McpExtension
    from runtime.uft.host import InMemoryUftHost

    host = InMemoryUftHost()
    McpExtension(host).init()
    host.start_test()

    if args.keyword not in host.keywords:
        print(f"Unknown keyword: {args.keyword}", file=sys.stderr)
        print(f"Valid keywords: {', '.join(host.keywords)}", file=sys.stderr)
        sys.exit(1)

    if args.context:
        host.call("MCP_SetContext", {"context": _load_json_args(args.context)})
    result = host.call(args.keyword, _load_json_args(args.args))
    host.end_test()

    for report in host.reports:
        print(f"[{report.status.value:7s}]  {report.title}: {report.details}")
    print(json.dumps(result, indent=2, default=str))


def cmd_serve(args: argparse.Namespace) -> None:
    """Serve the MCP tool catalog on stdio."""
    if args.manifest:
        os.environ["UFTMCP_MANIFEST"] = args.manifest

    from runtime.mcp_server import run

    run()


def cmd_run(args: argparse.Namespace) -> None:
    """Start the HTTP runtime server."""
    from runtime.manifest_loader import resolve_manifest

    if args.manifest:
        os.environ["UFTMCP_MANIFEST"] = args.manifest

    try:
        manifest = resolve_manifest(args.manifest)
    except Exception as exc:
        print(f"Error loading manifest: {exc}", file=sys.stderr)
        sys.exit(1)

    host = args.host or manifest.server.host
    port = args.port or manifest.server.port

    print(f"Starting UFT MCP runtime for '{manifest.app.name}'...")
    print(f"  Manifest:   {args.manifest or '(default)'}")
    print(f"  Host:       {host}")
    print(f"  Port:       {port}")
    print(f"  Validation: {manifest.validation.mode.value}")
    print()

    import uvicorn

    uvicorn.run(
        "runtime.app:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level="info",
    )


def cmd_logs(args: argparse.Namespace) -> None:
    """Query audit logs."""
    from runtime.audit.query import query_by_event, query_by_request, tail
    from contracts.audit import AuditEvent

    log_path = args.log_path

    if not Path(log_path).exists():
        print(f"No audit log found at {log_path}", file=sys.stderr)
        sys.exit(1)

    if args.request_id:
        entries = query_by_request(log_path, args.request_id)
    elif args.event:
        try:
            event = AuditEvent(args.event)
        except ValueError:
            valid = ", ".join(e.value for e in AuditEvent)
            print(f"Unknown event type: {args.event}", file=sys.stderr)
            print(f"Valid events: {valid}", file=sys.stderr)
            sys.exit(1)
        entries = query_by_event(log_path, event, limit=args.limit)
    else:
        entries = tail(log_path, n=args.limit)

    if not entries:
        print("No matching audit entries.")
        return

    for entry in entries:
        record = json.loads(entry.model_dump_json())
        if args.json:
            print(json.dumps(record))
        else:
            ts = record["ts"][:19]
            event = record["event"]
            rid = record["request_id"][:8]
            detail = json.dumps(record.get("detail", {}))
            print(f"{ts}  [{event:12s}]  {rid}  {detail}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uftmcp",
        description="UFT MCP server: UFT automation tools for AI assistants",
    )
    sub = parser.add_subparsers(dest="command")

    # validate
    p_val = sub.add_parser("validate", help="Validate a uftmcp.yaml manifest")
    p_val.add_argument(
        "manifest", nargs="?", default="uftmcp.yaml", help="Path to manifest"
    )
    p_val.set_defaults(func=cmd_validate)

    # tools
    p_tools = sub.add_parser("tools", help="List the tool catalog")
    p_tools.add_argument("--json", action="store_true", help="Output raw JSON schemas")
    p_tools.set_defaults(func=cmd_tools)

    # call
    p_call = sub.add_parser("call", help="Invoke a tool and print its result")
    p_call.add_argument("tool", help="Tool name")
    p_call.add_argument("--args", "-a", help="Tool arguments as a JSON object")
    p_call.add_argument("--manifest", "-m", help="Path to manifest")
    p_call.set_defaults(func=cmd_call)

    # keyword
    p_kw = sub.add_parser("keyword", help="Run an MCP keyword in an in-memory UFT host")
    p_kw.add_argument("keyword", help="Keyword name, e.g. MCP_Ping")
    p_kw.add_argument("--args", "-a", help="Keyword arguments as a JSON object")
    p_kw.add_argument("--context", "-c", help="Context to set first, as JSON")
    p_kw.set_defaults(func=cmd_keyword)

    # serve
    p_serve = sub.add_parser("serve", help="Serve the MCP tools on stdio")
    p_serve.add_argument("manifest", nargs="?", help="Path to manifest")
    p_serve.set_defaults(func=cmd_serve)

    # run
    p_run = sub.add_parser("run", help="Start the HTTP runtime server")
    p_run.add_argument("manifest", nargs="?", help="Path to manifest")
    p_run.add_argument("--host", help="Bind address (default from manifest)")
    p_run.add_argument("--port", type=int, help="Port (default from manifest)")
    p_run.add_argument("--reload", action="store_true", help="Enable auto-reload")
    p_run.set_defaults(func=cmd_run)

    # logs
    p_logs = sub.add_parser("logs", help="Query audit logs")
    p_logs.add_argument("log_path", help="Path to audit JSONL file")
    p_logs.add_argument("--request-id", "-r", help="Filter by request ID")
    p_logs.add_argument("--event", "-e", help="Filter by event type")
    p_logs.add_argument("--limit", "-n", type=int, default=20, help="Max entries")
    p_logs.add_argument("--json", action="store_true", help="Output raw JSON")
    p_logs.set_defaults(func=cmd_logs)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()

"""Shared initialisation logic for the UFT HTTP and MCP servers."""

from __future__ import annotations

from contracts.manifest import Manifest
from runtime.audit.logger import JsonlAuditLogger
from runtime.dispatcher import ToolDispatcher
from runtime.manifest_loader import resolve_manifest
from runtime.tools.registry import ToolRegistry, create_default_registry


class UftComponents:
    """Container for initialised server components."""

    def __init__(
        self,
        manifest: Manifest,
        registry: ToolRegistry,
        logger: JsonlAuditLogger,
    ) -> None:
        self.manifest = manifest
        self.registry = registry
        self.logger = logger
        self.dispatcher = ToolDispatcher(
            registry,
            validation_mode=manifest.validation.mode,
            logger=logger,
            app_name=manifest.app.name,
            redact_arguments=manifest.audit.redact_arguments,
        )


def build_components(manifest: Manifest) -> UftComponents:
    """Create the tool registry, audit logger, and dispatcher for *manifest*."""
    return UftComponents(
        manifest=manifest,
        registry=create_default_registry(),
        logger=JsonlAuditLogger(manifest.audit.path),
    )


def init_components(manifest_path: str | None = None) -> UftComponents:
    """Load the manifest and build components.

    Uses ``UFTMCP_MANIFEST`` if *manifest_path* is not provided.
    """
    return build_components(resolve_manifest(manifest_path))

"""Manifest loader: parse and validate uftmcp.yaml."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from contracts.manifest import Manifest

MANIFEST_ENV = "UFTMCP_MANIFEST"
DEFAULT_MANIFEST_PATH = "./uftmcp.yaml"


def load_manifest(path: str) -> Manifest:
    """Load a uftmcp.yaml file and return a validated Manifest."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Manifest not found: {path}")

    raw = p.read_text(encoding="utf-8")
    data = yaml.safe_load(raw)
    if data is None:
        return Manifest()
    if not isinstance(data, dict):
        raise ValueError(f"Manifest must be a YAML mapping, got {type(data).__name__}")

    return Manifest(**data)


def resolve_manifest(path: str | None = None) -> Manifest:
    """Load the configured manifest, falling back to defaults.

    Uses ``UFTMCP_MANIFEST`` if *path* is not provided.  Only the implicit
    ``./uftmcp.yaml`` may be absent; an explicit path must exist.
    """
    if path is None:
        path = os.environ.get(MANIFEST_ENV)
    if path is None:
        if not Path(DEFAULT_MANIFEST_PATH).exists():
            return Manifest()
        path = DEFAULT_MANIFEST_PATH
    return load_manifest(path)

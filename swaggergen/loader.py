"""Load a resource manifest from disk.

Manifests are YAML (JSON is accepted too, being a YAML subset). Mapping
order is preserved, which fixes the order resources and properties are
emitted in.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

import yaml


def load_manifest(path: Union[str, Path]) -> dict[str, Any]:
    """Load and parse a manifest file."""
    with open(path, encoding="utf-8") as f:
        manifest = yaml.safe_load(f)
    if not isinstance(manifest, dict):
        raise ValueError(f"{path}: manifest must be a mapping, got {type(manifest).__name__}")
    return manifest


def get_models(manifest: dict[str, Any]) -> dict[str, Any]:
    """Extract the resource declarations from a manifest."""
    return manifest.get("models") or {}

"""Serialize a generated document and write it to disk.

The output format follows the destination's extension: ``.json`` or
``.yaml`` / ``.yml``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from .assembler import build_document
from .config import Options
from .examples import ExampleGenerator

_FORMATS: dict[str, str] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


class UnsupportedFormatError(ValueError):
    """The output path's extension names no supported format."""


def output_format(output_path: Union[str, Path]) -> str:
    """Return ``json`` or ``yaml`` for an output path."""
    suffix = Path(output_path).suffix.lower()
    if suffix not in _FORMATS:
        raise UnsupportedFormatError(
            f"Output path must end in .json or .yaml, got {str(output_path)!r}"
        )
    return _FORMATS[suffix]


def render_document(document: Mapping[str, Any], fmt: str) -> str:
    """Serialize the document as ``json`` or ``yaml``."""
    if fmt == "json":
        return json.dumps(document, indent=4, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(
            dict(document),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
        )
    raise UnsupportedFormatError(f"Unsupported output format {fmt!r}")


def write_document(document: Mapping[str, Any], output_path: Union[str, Path]) -> Path:
    """Write the document to ``output_path``."""
    output_path = Path(output_path)
    text = render_document(document, output_format(output_path))

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")

    print(
        f"Generated {output_path} ({len(document.get('paths', {}))} paths,"
        f" {len(document.get('definitions', {}))} definitions)"
    )
    return output_path


def generate_and_write(
    manifest: Union[Mapping[str, Any], str, Path],
    output_path: Union[str, Path],
    options: Union[Options, Mapping[str, Any], None] = None,
    examples: Optional[ExampleGenerator] = None,
) -> dict[str, Any]:
    """Generate the document for ``manifest`` and write it to ``output_path``."""
    output_format(output_path)
    document = build_document(manifest, options, examples)
    write_document(document, output_path)
    return document

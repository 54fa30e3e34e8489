"""Assemble the full Swagger document from a manifest.

Seeds the baseline template with the manifest's metadata, then merges the
definitions and path items of every resource in declaration order.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union
from urllib.parse import urlsplit

import jinja2
import yaml

from .config import Options
from .definitions import generate_definitions
from .examples import ExampleGenerator, FakerExamples
from .loader import get_models, load_manifest
from .models import Resource
from .paths import Backend, generate_paths

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "swagger.yaml.j2"

DEFAULT_SCHEME = "https"


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def split_base_uri(base_uri: str, scheme: str = DEFAULT_SCHEME) -> tuple[str, str]:
    """Split a scheme-less base URI into (host, basePath).

    >>> split_base_uri("api.example.com/v1")
    ('api.example.com', '/v1')
    """
    parsed = urlsplit(f"{scheme}://{base_uri or ''}")
    return parsed.netloc, parsed.path or "/"


def build_template_context(manifest: Mapping[str, Any]) -> dict[str, Any]:
    """Project manifest-level metadata onto the baseline template's fields."""
    schemes = _as_list(manifest.get("schemes"))
    host, base_path = split_base_uri(
        manifest.get("baseUri", ""), schemes[0] if schemes else DEFAULT_SCHEME,
    )
    version = manifest.get("version")
    return {
        "title": str(manifest.get("title") or ""),
        "description": manifest.get("description"),
        "version": "" if version is None else str(version),
        "schemes": schemes,
        "formats": _as_list(manifest.get("formats")),
        "host": host,
        "base_path": base_path,
    }


def seed_document(context: Mapping[str, Any]) -> dict[str, Any]:
    """Render the baseline template into a fresh document."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.policies["json.dumps_kwargs"] = {"sort_keys": True, "ensure_ascii": False}
    template = env.get_template(TEMPLATE_NAME)
    return yaml.safe_load(template.render(**context))


def merge_into(target: dict[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``source`` into ``target`` in place.

    Keys missing from ``target`` are inserted; where both sides hold a
    mapping the inner maps are merged recursively. Any other clash takes
    the value from ``source``.
    """
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, Mapping):
            merge_into(existing, value)
        else:
            target[key] = value
    return target


def build_document(
    manifest: Union[Mapping[str, Any], str, Path],
    options: Union[Options, Mapping[str, Any], None] = None,
    examples: Optional[ExampleGenerator] = None,
) -> dict[str, Any]:
    """Generate the Swagger document for a manifest (mapping or file path)."""
    if isinstance(manifest, (str, Path)):
        manifest = load_manifest(manifest)
    if not isinstance(options, Options):
        options = Options.from_mapping(options)
    if examples is None and options.examples:
        examples = FakerExamples(seed=options.seed)

    document = seed_document(build_template_context(manifest))
    backend = Backend.from_document(document)

    for name, decl in get_models(manifest).items():
        logger.debug("Generating resource %s", name)
        resource = Resource.from_manifest(str(name), decl or {})
        merge_into(document["definitions"], generate_definitions(resource, options, examples))
        merge_into(document["paths"], generate_paths(resource, options, backend))

    logger.info(
        "Assembled %d paths and %d definitions",
        len(document["paths"]), len(document["definitions"]),
    )
    return document

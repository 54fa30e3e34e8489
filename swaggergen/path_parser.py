"""Parse resource path templates like ``/projects/{projectId:integer}/manifests/{id:integer}``."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

_PLACEHOLDER = re.compile(r"\{([^/{}]+)\}")


@dataclass(frozen=True)
class ParsedPath:
    """A path template split into its display form and typed parameters."""

    path: str
    display_path: str
    params: dict[str, Optional[str]] = field(default_factory=dict)


def _segments(path: str) -> list[str]:
    return [s for s in path.strip("/").split("/") if s]


def _strip_hint(segment: str) -> str:
    return _PLACEHOLDER.sub(lambda m: "{%s}" % m.group(1).split(":", 1)[0], segment)


def parse_path(raw_path: str, collection: bool = False) -> ParsedPath:
    """Parse a raw path template.

    With ``collection`` set the trailing identifier segment is dropped, so
    ``/manifests/{id}`` becomes ``/manifests``. Placeholders without a
    ``:type`` suffix map to ``None``.
    """
    segments = _segments(raw_path)
    if collection:
        segments = segments[:-1]

    path = "/" + "/".join(segments)
    display_path = "/" + "/".join(_strip_hint(s) for s in segments)

    params: dict[str, Optional[str]] = {}
    for match in _PLACEHOLDER.findall(path):
        name, _, type_name = match.partition(":")
        params[name] = type_name or None

    return ParsedPath(path=path, display_path=display_path, params=params)


def join_paths(*parts: str) -> str:
    """Join URL paths, collapsing duplicate slashes: ("/v1/", "/a") -> "/v1/a"."""
    segments: list[str] = []
    for part in parts:
        segments.extend(_segments(part or ""))
    return "/" + "/".join(segments)

"""Normalized values for the resources declared in a manifest.

A property may be declared in shorthand (``id: uuid``) or in full
(``id: {type: uuid, required: false, description: ..., example: ...}``).
A trailing ``?`` on the field name marks it optional.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from .catalog import OPERATIONS

# ``validator: false`` suppresses the type's tag, a string replaces it
ValidatorOverride = Union[str, bool, None]


@dataclass(frozen=True)
class Property:
    """A property declaration normalized to its full shape."""

    type: str
    required: bool = True
    description: Optional[str] = None
    example: Any = None
    validator: ValidatorOverride = None


def _parse_property(field_name: str, decl: Any) -> tuple[str, Property]:
    if isinstance(decl, Mapping):
        prop = Property(
            type=str(decl.get("type") or "string"),
            required=bool(decl.get("required", True)),
            description=decl.get("description"),
            example=decl.get("example"),
            validator=decl.get("validator"),
        )
    else:
        prop = Property(type=str(decl))

    if field_name.endswith("?"):
        field_name = field_name[:-1]
        prop = Property(
            type=prop.type,
            required=False,
            description=prop.description,
            example=prop.example,
            validator=prop.validator,
        )
    return field_name, prop


def normalize_properties(properties: Mapping[str, Any] | None) -> dict[str, Property]:
    """Normalize a declared property map, keeping declaration order."""
    parsed: dict[str, Property] = {}
    for field_name, decl in (properties or {}).items():
        name, prop = _parse_property(str(field_name), decl)
        parsed[name] = prop
    return parsed


@dataclass(frozen=True)
class Resource:
    """One resource ("model") of the manifest."""

    name: str
    path: str
    methods: tuple[str, ...] = tuple(OPERATIONS)
    read_only_flag: bool = False
    response: Mapping[str, Any] = field(default_factory=dict)
    modify: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_manifest(cls, name: str, decl: Mapping[str, Any]) -> "Resource":
        """Build a resource from its raw manifest entry."""
        methods = decl.get("methods")
        return cls(
            name=name,
            path=str(decl.get("path", "")),
            methods=tuple(OPERATIONS) if methods is None else tuple(methods),
            read_only_flag=bool(decl.get("readOnly", False)),
            response=decl.get("response") or {},
            modify=decl.get("modify") or {},
        )

    @property
    def operations(self) -> list[str]:
        """Enabled operations known to the catalog, in catalog order."""
        return [op for op in OPERATIONS if op in self.methods]

    @property
    def unknown_methods(self) -> list[str]:
        return [m for m in self.methods if m not in OPERATIONS]

    @property
    def is_read_only(self) -> bool:
        """True when flagged read-only or no enabled operation mutates."""
        if self.read_only_flag:
            return True
        return not any(OPERATIONS[op].modify for op in self.operations)

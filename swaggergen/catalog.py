"""Static lookup tables for property types and resource operations."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class DataType:
    """How a declared property type is serialized and exemplified."""

    type: str
    example: str
    validator: Optional[str] = None


@dataclass(frozen=True)
class OperationInfo:
    """HTTP binding of a named resource operation."""

    method: str
    collection: bool
    modify: bool
    description: str

    @property
    def is_listing(self) -> bool:
        return self.method == "get" and self.collection


# Example keys name Faker provider methods (see examples.py)
DATA_TYPES: Mapping[str, DataType] = MappingProxyType({
    "string": DataType("string", "word"),
    "integer": DataType("number", "random_int"),
    "number": DataType("number", "pyfloat"),
    "boolean": DataType("boolean", "boolean"),
    "uuid": DataType("string", "uuid4", "string.guid"),
    "url": DataType("string", "url", "string.uri"),
    "email": DataType("string", "email", "string.email"),
    "date": DataType("string", "date", "string.isoDate"),
    "datetime": DataType("string", "iso8601", "string.isoDate"),
})

OPERATIONS: Mapping[str, OperationInfo] = MappingProxyType({
    "list": OperationInfo("get", True, False, "Return a list of {}"),
    "create": OperationInfo("post", True, True, "Create a new {}"),
    "read": OperationInfo("get", False, False, "Return a {}"),
    "update": OperationInfo("put", False, True, "Update a {}"),
    "delete": OperationInfo("delete", False, False, "Delete a {}"),
})


def data_type_for(type_name: str) -> DataType:
    """Look up a declared type, passing unknown types straight through."""
    known = DATA_TYPES.get(type_name)
    if known is not None:
        return known
    return DataType(type_name, type_name)


def is_known_type(type_name: str) -> bool:
    return type_name in DATA_TYPES

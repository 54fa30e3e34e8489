"""Build Swagger path items for a resource's enabled operations.

Each operation maps onto one of two display paths:

  - collection root (list, create):      /projects/{projectId}/manifests
  - resource root (read, update, delete): /projects/{projectId}/manifests/{id}

Both path items are seeded up front, then each operation adds its verb.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .catalog import OPERATIONS, OperationInfo
from .config import Options
from .definitions import definition_ref, modify_key, response_key
from .models import Resource
from .naming import camelize, humanize, titleize
from .path_parser import ParsedPath, join_paths, parse_path

logger = logging.getLogger(__name__)

COLLECTION_KEY = "x-kraken-collection"
INTEGRATION_KEY = "x-amazon-apigateway-integration"

# Path parameters without a type hint
DEFAULT_PARAM_TYPE = "string"

# Any 2xx from the backend is passed through as 200
_SUCCESS_PATTERN = "2\\d{2}"

_REQUEST_TEMPLATE = json.dumps(
    {
        "resourcePath": "$context.resourcePath",
        "httpMethod": "$context.httpMethod",
        "queryParams": {
            "filters": "$util.base64Encode($input.params().querystring.filters)",
        },
    },
    separators=(",", ":"),
)


@dataclass(frozen=True)
class Backend:
    """Where gateway integrations forward requests to."""

    scheme: str
    host: str
    base_path: str = "/"

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Backend":
        schemes = document.get("schemes") or ["https"]
        return cls(
            scheme=schemes[0],
            host=document.get("host") or "",
            base_path=document.get("basePath") or "/",
        )


def _path_parameters(resource: Resource, parsed: ParsedPath) -> list[dict[str, Any]]:
    return [
        {
            "name": name,
            "in": "path",
            "type": type_name or DEFAULT_PARAM_TYPE,
            "required": True,
            "description": f"The {humanize(name)} related to this {titleize(resource.name)}",
        }
        for name, type_name in parsed.params.items()
    ]


def _body_parameter(resource: Resource) -> dict[str, Any]:
    return {
        "name": "payload",
        "in": "body",
        "description": f"The new {titleize(resource.name)} you want to create",
        "schema": definition_ref(modify_key(resource.name)),
    }


def _response_schema(resource: Resource, info: OperationInfo) -> dict[str, Any]:
    ref = definition_ref(response_key(resource.name))
    if info.is_listing:
        return {"type": "array", "items": ref}
    return ref


def generate_integration(
    info: OperationInfo, parsed: ParsedPath, backend: Backend,
) -> dict[str, Any]:
    """Build the API gateway integration block for one operation."""
    upstream = join_paths(backend.base_path, parsed.display_path)
    return {
        "type": "http",
        "uri": f"{backend.scheme}://{backend.host}{upstream}",
        "httpMethod": info.method.upper(),
        "requestParameters": {
            f"integration.request.path.{name}": f"method.request.path.{name}"
            for name in parsed.params
        },
        "requestTemplates": {"application/json": _REQUEST_TEMPLATE},
        "responses": {_SUCCESS_PATTERN: {"statusCode": "200"}},
    }


def generate_operation(
    resource: Resource,
    operation: str,
    options: Options,
    backend: Optional[Backend] = None,
) -> dict[str, Any]:
    """Build the Swagger operation object for a named operation."""
    info = OPERATIONS[operation]
    parsed = parse_path(resource.path, info.collection)
    description = info.description.format(titleize(resource.name))

    parameters = _path_parameters(resource, parsed)
    if info.modify and not resource.is_read_only:
        parameters.append(_body_parameter(resource))

    result: dict[str, Any] = {
        "description": description,
        "operationId": operation,
        "parameters": parameters,
        "responses": {
            "200": {
                "description": description,
                "schema": _response_schema(resource, info),
            },
        },
    }

    if options.api_gateway:
        if backend is None:
            raise ValueError("api_gateway is enabled but no backend was given")
        result[INTEGRATION_KEY] = generate_integration(info, parsed, backend)

    return result


def generate_paths(
    resource: Resource,
    options: Options,
    backend: Optional[Backend] = None,
) -> dict[str, Any]:
    """Return the path items for every enabled operation, keyed by display path."""
    for name in resource.unknown_methods:
        logger.warning("Skipping unknown operation %r on %s", name, resource.name)

    tag = camelize(resource.name)
    paths: dict[str, Any] = {}
    for collection in (True, False):
        display_path = parse_path(resource.path, collection).display_path
        paths.setdefault(display_path, {COLLECTION_KEY: tag})

    for operation in resource.operations:
        info = OPERATIONS[operation]
        display_path = parse_path(resource.path, info.collection).display_path
        logger.debug("%s %s -> %s", info.method.upper(), display_path, operation)
        paths[display_path][info.method] = generate_operation(
            resource, operation, options, backend,
        )

    return paths

"""Render a resource's property map as a Swagger schema definition."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .catalog import data_type_for, is_known_type
from .config import Options
from .examples import ExampleGenerator
from .models import Property, Resource, normalize_properties
from .naming import camelize, humanize, titleize

logger = logging.getLogger(__name__)

VALIDATOR_KEY = "x-kraken-validator"


def response_key(resource_name: str) -> str:
    return f"{camelize(resource_name)}Response"


def modify_key(resource_name: str) -> str:
    return f"{camelize(resource_name)}Modify"


def definition_ref(key: str) -> dict[str, str]:
    return {"$ref": f"#/definitions/{key}"}


def _validator_for(prop: Property, default: Optional[str]) -> Optional[str]:
    if prop.validator is False:
        return None
    if isinstance(prop.validator, str) and prop.validator:
        return prop.validator
    return default


def property_schema(
    resource_name: str,
    field_name: str,
    prop: Property,
    options: Options,
    examples: Optional[ExampleGenerator] = None,
) -> dict[str, Any]:
    """Build the schema of a single normalized property."""
    if not is_known_type(prop.type):
        logger.warning(
            "Unknown type %r for %s.%s, passing it through", prop.type, resource_name, field_name,
        )
    data_type = data_type_for(prop.type)

    schema: dict[str, Any] = {
        "type": data_type.type,
        "description": prop.description or (
            f"The {humanize(field_name)} of the {titleize(resource_name)}"
        ),
    }

    if options.examples:
        example = prop.example
        if example is None and examples is not None:
            example = examples(data_type.example)
        if example is not None:
            schema["example"] = example

    if options.validators:
        validator = _validator_for(prop, data_type.validator)
        if validator:
            schema[VALIDATOR_KEY] = validator

    return schema


def generate_definition(
    resource_name: str,
    properties: Mapping[str, Any] | None,
    options: Options,
    examples: Optional[ExampleGenerator] = None,
) -> dict[str, Any]:
    """Build an object definition from a declared property map."""
    parsed = normalize_properties(properties)
    return {
        "type": "object",
        "required": [name for name, prop in parsed.items() if prop.required],
        "properties": {
            name: property_schema(resource_name, name, prop, options, examples)
            for name, prop in parsed.items()
        },
    }


def generate_definitions(
    resource: Resource,
    options: Options,
    examples: Optional[ExampleGenerator] = None,
) -> dict[str, Any]:
    """Return the Response definition, plus Modify unless the resource is read-only."""
    definitions = {
        response_key(resource.name): generate_definition(
            resource.name, resource.response, options, examples,
        ),
    }
    if not resource.is_read_only:
        definitions[modify_key(resource.name)] = generate_definition(
            resource.name, resource.modify, options, examples,
        )
    return definitions

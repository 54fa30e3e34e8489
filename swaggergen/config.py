"""Generation toggles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Options:
    """Toggles for a generation run.

    examples:    emit example values on definition properties
    validators:  emit ``x-kraken-validator`` where the type declares one
    api_gateway: attach ``x-amazon-apigateway-integration`` to operations
    seed:        seed for the default Faker example generator; unset uses a
                 fixed seed so runs are repeatable
    """

    examples: bool = True
    validators: bool = True
    api_gateway: bool = False
    seed: Optional[int] = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> "Options":
        """Build options from wire names (``apiGateway``); missing keys keep defaults."""
        mapping = mapping or {}
        api_gateway = mapping.get("apiGateway", mapping.get("api_gateway", cls.api_gateway))
        seed = mapping.get("seed")
        return cls(
            examples=bool(mapping.get("examples", cls.examples)),
            validators=bool(mapping.get("validators", cls.validators)),
            api_gateway=bool(api_gateway),
            seed=None if seed is None else int(seed),
        )

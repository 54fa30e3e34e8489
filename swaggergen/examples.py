"""Example values for definition properties.

An example generator is any callable mapping an example key to a value,
or to ``None`` when it has nothing for that key. The default one asks
Faker; tests inject a fixed mapping instead.
"""

from __future__ import annotations

import datetime
import decimal
import logging
from typing import Any, Callable, Mapping, Optional

from faker import Faker

logger = logging.getLogger(__name__)

ExampleGenerator = Callable[[str], Any]

# Unseeded runs still produce the same document for the same manifest
DEFAULT_SEED = 0


def _as_scalar(value: Any) -> Any:
    """Coerce a provider result to a JSON scalar, or ``None`` if it has no such form."""
    if isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, decimal.Decimal):
        return float(value)
    return None


class FakerExamples:
    """Resolve example keys to zero-argument Faker provider methods."""

    def __init__(self, seed: Optional[int] = None, locale: str = "en_US") -> None:
        self.faker = Faker(locale)
        self.faker.seed_instance(DEFAULT_SEED if seed is None else seed)

    def __call__(self, key: str) -> Any:
        if not key or key.startswith("_"):
            return None
        provider = getattr(self.faker, key, None)
        if not callable(provider):
            logger.debug("No example provider for %r", key)
            return None
        try:
            value = provider()
        except TypeError:
            # provider needs arguments
            logger.debug("Example provider %r is not usable without arguments", key)
            return None

        example = _as_scalar(value)
        if example is None:
            logger.debug("Example provider %r returned %s, skipping", key, type(value).__name__)
        return example


def fixed_examples(values: Mapping[str, Any]) -> ExampleGenerator:
    """Build a deterministic generator from a key -> value mapping."""
    return lambda key: values.get(key)

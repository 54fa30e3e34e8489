"""Shared fixtures: the registry manifest and a deterministic example generator."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import pytest

from swaggergen.examples import fixed_examples
from swaggergen.loader import load_manifest

FIXTURES = Path(__file__).parent / "fixtures"
REGISTRY_PATH = FIXTURES / "registry.yaml"

EXAMPLE_VALUES: dict[str, Any] = {
    "word": "alpha",
    "random_int": 42,
    "boolean": True,
    "uuid4": "0b6f2f5e-8a3c-4a57-9d62-2d4f0d7f6c11",
    "url": "https://example.com/manifest",
}


@pytest.fixture(scope="session")
def registry_manifest() -> dict[str, Any]:
    """The parsed registry fixture; copy before mutating."""
    return load_manifest(REGISTRY_PATH)


@pytest.fixture
def manifest(registry_manifest) -> dict[str, Any]:
    return copy.deepcopy(registry_manifest)


@pytest.fixture
def examples():
    return fixed_examples(EXAMPLE_VALUES)

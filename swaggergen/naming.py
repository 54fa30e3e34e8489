"""Humanize resource and field names for descriptions and definition keys.

Resource names arrive as written in the manifest (``manifest``,
``roaming_device``, ``roamingDevice``, ``roaming-device``):

  - underscore("projectId")      -> "project_id"
  - humanize("projectId")        -> "project id"
  - titleize("roaming_device")   -> "Roaming Device"
  - camelize("roaming_device")   -> "RoamingDevice"
"""

from __future__ import annotations

import re


def underscore(name: str) -> str:
    """Convert camelCase, PascalCase or kebab-case to snake_case."""
    s1 = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    s2 = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[\-\s]+", "_", s2).lower()


def _words(name: str) -> list[str]:
    return [w for w in underscore(name).split("_") if w]


def humanize(name: str) -> str:
    """Return the lower-case, space separated form of a name."""
    return " ".join(_words(name))


def titleize(name: str) -> str:
    """Return the name with every word capitalized."""
    return " ".join(w.capitalize() for w in _words(name))


def camelize(name: str) -> str:
    """Return the PascalCase form used for definition keys."""
    return "".join(w.capitalize() for w in _words(name))

"""Compile a declarative resource manifest into a Swagger 2.0 document."""

from __future__ import annotations

from .assembler import build_document
from .codegen import UnsupportedFormatError, generate_and_write, write_document
from .config import Options
from .loader import load_manifest

__all__ = [
    "Options",
    "UnsupportedFormatError",
    "build_document",
    "generate_and_write",
    "load_manifest",
    "write_document",
]

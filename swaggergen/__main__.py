"""Entry point: python -m swaggergen MANIFEST OUTPUT [options]

Reads a resource manifest and writes the generated Swagger document as
JSON or YAML, chosen by OUTPUT's extension.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import yaml

from .codegen import UnsupportedFormatError, generate_and_write
from .config import Options


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swaggergen",
        description="Generate a Swagger 2.0 document from a resource manifest.",
    )
    parser.add_argument("manifest", help="path to the manifest (YAML or JSON)")
    parser.add_argument("output", help="output path, .json or .yaml")
    parser.add_argument(
        "--no-examples", dest="examples", action="store_false",
        help="omit example values from definitions",
    )
    parser.add_argument(
        "--no-validators", dest="validators", action="store_false",
        help="omit x-kraken-validator annotations",
    )
    parser.add_argument(
        "--api-gateway", dest="api_gateway", action="store_true",
        help="attach API gateway integration blocks to every operation",
    )
    parser.add_argument("--seed", type=int, help="seed for generated example values")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    options = Options(
        examples=args.examples,
        validators=args.validators,
        api_gateway=args.api_gateway,
        seed=args.seed,
    )
    try:
        generate_and_write(args.manifest, args.output, options)
    except UnsupportedFormatError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

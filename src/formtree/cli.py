"""
formtree command line entry point.

Usage:
    # Validate a JSON data file against a JSON schema file
    formtree validate schema.json data.json

    # With per-field options and strict unknown-key handling
    formtree validate schema.json data.json --options options.json --strict

    # Print the rendered UI structure
    formtree render schema.json --data data.json

Exit codes: 0 valid, 1 invalid data, 2 bad schema/options/input.
"""

import argparse
import dataclasses
import json
import sys
from pathlib import Path
from typing import Any

from formtree.config import get_config
from formtree.exceptions import FormTreeError
from formtree.form import Form
from formtree.logging_setup import setup_logging
from formtree.registry import default_registry

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _load_json(path: str) -> Any:
    with Path(path).open(encoding="utf-8") as f:
        return json.load(f)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="formtree",
        description="Build field trees from JSON Schema fragments and validate data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  FORMTREE_STRICT_VALUES      Reject unknown keys (default: false)
  FORMTREE_REQUIRED_MESSAGE   Message for missing required values
  FORMTREE_LOG_LEVEL          Log level (default: WARNING)
  FORMTREE_INDENT_JSON        JSON output indent (default: 2)
        """,
    )
    parser.add_argument("--verbose", action="store_true", help="Log construction and validation decisions")

    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser("validate", help="Validate data against a schema")
    validate_parser.add_argument("schema", help="Path to the JSON schema file")
    validate_parser.add_argument("data", help="Path to the JSON data file")
    validate_parser.add_argument("--options", help="Path to a JSON file of per-field options")
    validate_parser.add_argument("--strict", action="store_true", help="Reject unknown keys in data")

    render_parser = subparsers.add_parser("render", help="Render the field tree")
    render_parser.add_argument("schema", help="Path to the JSON schema file")
    render_parser.add_argument("--data", help="Path to a JSON data file to fill in")
    render_parser.add_argument("--options", help="Path to a JSON file of per-field options")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    config = get_config()

    setup_logging(console=True, verbose=args.verbose)

    if getattr(args, "strict", False):
        config = dataclasses.replace(config, strict_values=True)

    try:
        schema = _load_json(args.schema)
        options = _load_json(args.options) if args.options else None
        form = Form(schema, options=options, registry=default_registry(config))

        if args.command == "validate":
            result = form.validate_data(_load_json(args.data))
            print(json.dumps(result.model_dump(), indent=config.indent_json_output))
            return EXIT_VALID if result.is_valid else EXIT_INVALID

        if args.data:
            form.set_data(_load_json(args.data))
        print(json.dumps(form.render(), indent=config.indent_json_output, default=str))
        return EXIT_VALID

    except (OSError, json.JSONDecodeError, FormTreeError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())

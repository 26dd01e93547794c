"""Validate a JSON document against a schema file.

Usage:
  jsonvalidator SCHEMA DOCUMENT [--root-name NAME] [--json] [--log-level LEVEL]

Exit codes:
  0 - document is valid
  1 - document does not conform to the schema
  2 - schema or document could not be loaded
"""

from __future__ import annotations

import argparse
import logging
import sys

from jsonvalidator.config import LOG_LEVELS, get_settings
from jsonvalidator.exceptions import JsonValidatorException, ValidationException
from jsonvalidator.loader import load_document
from jsonvalidator.schemas import to_error_response
from jsonvalidator.validator import Validator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonvalidator",
        description="Validate a JSON document against a draft-03 JSON Schema.",
    )
    parser.add_argument("schema", help="Path to the schema file")
    parser.add_argument("document", help="Path to the JSON document to validate")
    parser.add_argument("--root-name", default=None, help="Entity path of the document root")
    parser.add_argument("--json", action="store_true", help="Print errors as a JSON error response")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override JSONVALIDATOR_LOG_LEVEL",
    )
    return parser


def _report(exc: JsonValidatorException, as_json: bool) -> None:
    if as_json:
        print(to_error_response(exc).model_dump_json())
    else:
        print(f"ERROR: {exc.message}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        validator = Validator.from_file(args.schema)
        document = load_document(args.document)
    except JsonValidatorException as exc:
        logger.warning(f"{exc.code}: {exc.message}")
        _report(exc, args.json)
        return 2

    try:
        validator.validate(document, args.root_name)
    except ValidationException as exc:
        _report(exc, args.json)
        return 1

    print(f"OK: {args.document} is valid against {args.schema}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""
JSON Validator - Validator.

Binds a schema tree to the validation engine. A Validator holds no per-call
state, so one instance can validate any number of values, from any thread.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jsonvalidator.config import get_settings
from jsonvalidator.core import check_type
from jsonvalidator.exceptions import ValidationException
from jsonvalidator.loader import load_schema
from jsonvalidator.schemas import SchemaNode

logger = logging.getLogger(__name__)


class Validator:
    """
    Validates decoded JSON values against a draft-03 schema.

    Example:
        validator = Validator({"type": "string", "minLength": 2})
        validator.validate("ab")      # passes
        validator.validate("a")       # raises TooShortException
    """

    def __init__(self, schema: SchemaNode | Mapping[str, Any] | None):
        """
        Args:
            schema: A SchemaNode, or a decoded schema document.

        Raises:
            SchemaException: If the schema document is empty or unusable.
        """
        if isinstance(schema, SchemaNode):
            self._schema = schema
        else:
            self._schema = SchemaNode.from_document(schema)
        logger.debug(f"Validator ready [types={self._schema.declared_types()}]")

    @classmethod
    def from_file(cls, path: str | Path) -> "Validator":
        """Load the schema at ``path`` and build a Validator for it."""
        return cls(load_schema(path))

    @property
    def schema(self) -> SchemaNode:
        return self._schema

    def validate(self, value: Any, root_name: str | None = None) -> None:
        """
        Validate ``value``, stopping at the first violation.

        Args:
            value: Decoded JSON value. Never modified.
            root_name: Entity path of the root value; defaults to the
                configured root name (``root``).

        Raises:
            ValidationException: The first constraint ``value`` breaks.
        """
        path = root_name or get_settings().root_name
        try:
            check_type(value, self._schema, path)
        except ValidationException as exc:
            logger.debug(f"Validation failed: {exc.code} - {exc.message}")
            raise

    def is_valid(self, value: Any, root_name: str | None = None) -> bool:
        """Return True if ``value`` conforms to the schema."""
        try:
            self.validate(value, root_name)
        except ValidationException:
            return False
        return True

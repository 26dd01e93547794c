"""
JSON Validator - Common Schemas.

Pydantic models for the schema tree the engine walks and for the error
envelope a presentation layer renders.
"""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    StrictBool,
    ValidationError,
    field_validator,
)

from jsonvalidator.exceptions import JsonValidatorException, SchemaException

ANY_TYPE = "any"


# =============================================================================
# Schema Tree
# =============================================================================


class SchemaNode(BaseModel):
    """
    One node of a draft-03 schema document.

    Keywords are exposed in snake_case but only populated from their camelCase
    draft-03 names; a key such as ``min_length`` is an unknown keyword. Keywords
    the engine does not act on (``title``, ``description``, ``$schema``, ...)
    are kept as extra fields.
    """

    model_config = ConfigDict(
        extra="allow",
        frozen=True,
    )

    type: str | list[str] | None = None
    properties: dict[str, "SchemaNode"] = Field(default_factory=dict)
    required: StrictBool = False
    additional_properties: StrictBool | dict[str, Any] | None = Field(default=None, alias="additionalProperties")

    minimum: int | float | None = None
    maximum: int | float | None = None

    pattern: str | None = None
    min_length: int | None = Field(default=None, alias="minLength")
    max_length: int | None = Field(default=None, alias="maxLength")

    min_items: int | None = Field(default=None, alias="minItems")
    max_items: int | None = Field(default=None, alias="maxItems")
    unique_items: StrictBool = Field(default=False, alias="uniqueItems")
    enum: list[Any] | None = None

    _compiled_pattern: re.Pattern[str] | None = PrivateAttr(default=None)

    @field_validator("pattern")
    @classmethod
    def _pattern_compiles(cls, value: str | None) -> str | None:
        if value:
            try:
                re.compile(value)
            except re.error as exc:
                raise ValueError(f"invalid regular expression: {exc}") from exc
        return value

    def model_post_init(self, __context: Any) -> None:
        if self.pattern:
            self._compiled_pattern = re.compile(self.pattern)

    @property
    def compiled_pattern(self) -> re.Pattern[str] | None:
        """The ``pattern`` keyword compiled once per node; None when unset."""
        return self._compiled_pattern

    def declared_types(self) -> list[str]:
        """Return the ``type`` keyword as an ordered list; missing means ``any``."""
        if isinstance(self.type, str):
            return [self.type] if self.type else [ANY_TYPE]
        if self.type:
            return list(self.type)
        return [ANY_TYPE]

    @property
    def forbids_additional_properties(self) -> bool:
        return self.additional_properties is False

    @classmethod
    def from_document(cls, document: Any) -> "SchemaNode":
        """
        Build a schema tree from a decoded JSON document.

        Raises:
            SchemaException: If the document is empty, not an object, or
                contains keywords of the wrong shape.
        """
        if document is None:
            raise SchemaException("Schema document is empty")
        if not isinstance(document, Mapping):
            raise SchemaException(
                "Schema document must be a JSON object",
                details={"received": type(document).__name__},
            )
        if not document:
            raise SchemaException("Schema document is empty")
        try:
            return cls.model_validate(document)
        except ValidationError as exc:
            errors = exc.errors(include_url=False, include_context=False, include_input=False)
            raise SchemaException(
                "Schema document is not usable",
                details={"errors": [{"loc": ".".join(str(p) for p in e["loc"]), "msg": e["msg"]} for e in errors]},
            ) from exc


SchemaNode.model_rebuild()


# =============================================================================
# Error Responses
# =============================================================================


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(default=None, description="Additional context")


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: ErrorDetail


def to_error_response(exc: JsonValidatorException) -> ErrorResponse:
    """Render an exception into the standard error envelope."""
    return ErrorResponse(
        error=ErrorDetail(code=exc.code, message=exc.message, details=exc.details)
    )

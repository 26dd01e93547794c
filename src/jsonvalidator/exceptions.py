"""
JSON Validator - Custom Exceptions.

Two families share one base class:

- schema errors, raised while a schema is loaded or a Validator is built;
- validation errors, raised by ``Validator.validate`` on the first value
  that does not conform.

Every exception carries a machine-readable ``code``, the human-readable
``message`` and a ``details`` dict with the offending values.
"""

from typing import Any


class JsonValidatorException(Exception):
    """Base exception for the validator."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)


# =============================================================================
# Schema errors
# =============================================================================


class SchemaException(JsonValidatorException):
    """Raised when a schema document is missing, unparseable or unusable."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        code: str = "INVALID_SCHEMA",
    ):
        super().__init__(code=code, message=message, details=details)


class SchemaNotFoundException(SchemaException):
    """Raised when the schema file does not exist."""

    def __init__(self, path: str):
        super().__init__(
            message="Schema file not found",
            details={"path": path},
            code="SCHEMA_NOT_FOUND",
        )


class DocumentException(JsonValidatorException):
    """Raised when a data document cannot be read or decoded."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(
            code="INVALID_DOCUMENT",
            message=message,
            details={"path": path} if path else None,
        )


# =============================================================================
# Validation errors
# =============================================================================


def _format(value: Any) -> str:
    """Render a JSON scalar as it appears in messages: true is 1, false and null are empty."""
    if isinstance(value, bool):
        return "1" if value else ""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _join(values: list[Any], separator: str) -> str:
    return separator.join(_format(v) for v in values)


class ValidationException(JsonValidatorException):
    """Raised when a value does not conform to its schema."""

    def __init__(
        self,
        path: str,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: dict[str, Any] | None = None,
    ):
        self.path = path
        super().__init__(
            code=code,
            message=message,
            details={"path": path, **(details or {})},
        )


class TypeMismatchException(ValidationException):
    """Raised when a value matches none of the declared types."""

    def __init__(self, path: str, declared_types: list[str]):
        self.declared_types = list(declared_types)
        super().__init__(
            path,
            f"Property [{path}] must be one of the following types: [{_join(declared_types, ', ')}]",
            code="TYPE_MISMATCH",
            details={"declared_types": self.declared_types},
        )


class MissingRequiredException(ValidationException):
    """Raised when a property whose schema says ``required`` is absent."""

    def __init__(self, path: str, property_name: str):
        self.property_name = property_name
        super().__init__(
            path,
            f"Missing required property [{property_name}] for [{path}]",
            code="MISSING_REQUIRED",
            details={"property": property_name},
        )


class AdditionalPropertiesException(ValidationException):
    """Raised when an object carries keys its schema does not declare."""

    def __init__(self, path: str, extra_keys: list[str]):
        self.extra_keys = list(extra_keys)
        super().__init__(
            path,
            f"Additional properties [{_join(extra_keys, ',')}] not allowed for property [{path}]",
            code="ADDITIONAL_PROPERTIES",
            details={"extra_keys": self.extra_keys},
        )


class BelowMinimumException(ValidationException):
    """Raised when a number is below ``minimum``."""

    def __init__(self, path: str, minimum: int | float, value: int | float):
        self.minimum = minimum
        super().__init__(
            path,
            f"Invalid value for [{path}], minimum is [{_format(minimum)}]",
            code="BELOW_MINIMUM",
            details={"minimum": minimum, "value": value},
        )


class AboveMaximumException(ValidationException):
    """Raised when a number is above ``maximum``."""

    def __init__(self, path: str, maximum: int | float, value: int | float):
        self.maximum = maximum
        super().__init__(
            path,
            f"Invalid value for [{path}], maximum is [{_format(maximum)}]",
            code="ABOVE_MAXIMUM",
            details={"maximum": maximum, "value": value},
        )


class PatternMismatchException(ValidationException):
    """Raised when a string does not match ``pattern``."""

    def __init__(self, path: str, pattern: str):
        self.pattern = pattern
        super().__init__(
            path,
            f"String does not match pattern for [{path}]",
            code="PATTERN_MISMATCH",
            details={"pattern": pattern},
        )


class TooShortException(ValidationException):
    """Raised when a string is shorter than ``minLength``."""

    def __init__(self, path: str, min_length: int):
        self.min_length = min_length
        super().__init__(
            path,
            f"String too short for [{path}], minimum length is [{min_length}]",
            code="TOO_SHORT",
            details={"min_length": min_length},
        )


class TooLongException(ValidationException):
    """Raised when a string is longer than ``maxLength``."""

    def __init__(self, path: str, max_length: int):
        self.max_length = max_length
        super().__init__(
            path,
            f"String too long for [{path}], maximum length is [{max_length}]",
            code="TOO_LONG",
            details={"max_length": max_length},
        )


class TooFewItemsException(ValidationException):
    """Raised when an array has fewer elements than ``minItems``."""

    def __init__(self, path: str, min_items: int):
        self.min_items = min_items
        super().__init__(
            path,
            f"Not enough array items for [{path}], minimum is [{min_items}]",
            code="TOO_FEW_ITEMS",
            details={"min_items": min_items},
        )


class TooManyItemsException(ValidationException):
    """Raised when an array has more elements than ``maxItems``."""

    def __init__(self, path: str, max_items: int):
        self.max_items = max_items
        super().__init__(
            path,
            f"Too many array items for [{path}], maximum is [{max_items}]",
            code="TOO_MANY_ITEMS",
            details={"max_items": max_items},
        )


class DuplicateItemsException(ValidationException):
    """Raised when ``uniqueItems`` is set and an array repeats an element."""

    def __init__(self, path: str):
        super().__init__(
            path,
            f"All items in array [{path}] must be unique",
            code="DUPLICATE_ITEMS",
        )


class EnumMismatchException(ValidationException):
    """Raised when an array element is not one of the ``enum`` values."""

    def __init__(self, path: str, value: Any, allowed: list[Any]):
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            path,
            f"Invalid value(s) for [{path}], allowable values are [{_join(allowed, ',')}]",
            code="ENUM_MISMATCH",
            details={"value": value, "allowed": self.allowed},
        )

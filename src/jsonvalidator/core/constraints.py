"""
Constraint checks applied once a value has matched a declared type.

Each ``check_*`` function either returns silently or raises exactly one
``ValidationException``. Within a type the checks run in a fixed order, so
a value breaking several keywords always reports the same one.

Bounds of zero are treated as unset: ``minimum: 0``, ``maxLength: 0`` and
friends are never enforced.
"""

from collections.abc import Callable, Mapping
from typing import Any

from jsonvalidator.exceptions import (
    AboveMaximumException,
    AdditionalPropertiesException,
    BelowMinimumException,
    DuplicateItemsException,
    EnumMismatchException,
    MissingRequiredException,
    PatternMismatchException,
    TooFewItemsException,
    TooLongException,
    TooManyItemsException,
    TooShortException,
)
from jsonvalidator.schemas import SchemaNode

ChildChecker = Callable[[Any, SchemaNode, str], None]


def _is_set(bound: int | float | None) -> bool:
    return bool(bound)


# =============================================================================
# Object
# =============================================================================


def check_object(value: Mapping[str, Any], schema: SchemaNode, path: str, check_child: ChildChecker) -> None:
    """
    Walk the declared properties in document order, then reject undeclared keys.

    ``check_child`` is called for every declared property present in
    ``value``; absent properties only fail when their own schema says
    ``required``.
    """
    for name, child in schema.properties.items():
        if name in value:
            check_child(value[name], child, f"{path}.{name}")
        elif child.required:
            raise MissingRequiredException(path, name)

    if schema.forbids_additional_properties:
        extra = [key for key in value if key not in schema.properties]
        if extra:
            raise AdditionalPropertiesException(path, extra)


# =============================================================================
# Number / Integer
# =============================================================================


def check_number(value: int | float, schema: SchemaNode, path: str) -> None:
    if _is_set(schema.minimum) and value < schema.minimum:
        raise BelowMinimumException(path, schema.minimum, value)
    if _is_set(schema.maximum) and value > schema.maximum:
        raise AboveMaximumException(path, schema.maximum, value)


check_integer = check_number


# =============================================================================
# String
# =============================================================================


def check_string(value: str, schema: SchemaNode, path: str) -> None:
    if schema.compiled_pattern is not None and not schema.compiled_pattern.search(value):
        raise PatternMismatchException(path, schema.pattern)
    if _is_set(schema.min_length) and len(value) < schema.min_length:
        raise TooShortException(path, schema.min_length)
    if _is_set(schema.max_length) and len(value) > schema.max_length:
        raise TooLongException(path, schema.max_length)


# =============================================================================
# Array
# =============================================================================


def _canonical(value: Any) -> Any:
    """Hashable stand-in for a JSON value; equal values map to equal keys."""
    if isinstance(value, bool) or value is None:
        return ("literal", value)
    if isinstance(value, Mapping):
        return ("object", frozenset((key, _canonical(item)) for key, item in value.items()))
    if isinstance(value, (list, tuple)):
        return ("array", tuple(_canonical(item) for item in value))
    if isinstance(value, (int, float)):
        return ("number", value)
    return ("string", value)


def check_array(value: list[Any], schema: SchemaNode, path: str) -> None:
    """Check item count, uniqueness and enum membership of every element."""
    count = len(value)
    if _is_set(schema.min_items) and count < schema.min_items:
        raise TooFewItemsException(path, schema.min_items)
    if _is_set(schema.max_items) and count > schema.max_items:
        raise TooManyItemsException(path, schema.max_items)

    if schema.unique_items and len({_canonical(item) for item in value}) != count:
        raise DuplicateItemsException(path)

    # enum constrains the elements, not the array itself
    if schema.enum:
        for item in value:
            if item not in schema.enum:
                raise EnumMismatchException(path, item, schema.enum)

"""
Type dispatch for the validation engine.

The ``type`` keyword is normalised to an ordered list of names. The first
name whose predicate accepts the value wins: its constraint checks run and
no later name is tried. ``any`` and names the engine does not know always
match and carry no constraints.
"""

from collections.abc import Callable, Mapping
from typing import Any

from jsonvalidator.core import constraints
from jsonvalidator.exceptions import TypeMismatchException
from jsonvalidator.schemas import SchemaNode


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_null(value: Any) -> bool:
    return value is None


TYPE_PREDICATES: dict[str, Callable[[Any], bool]] = {
    "object": is_object,
    "string": is_string,
    "array": is_array,
    "number": is_number,
    "integer": is_integer,
    "boolean": is_boolean,
    "null": is_null,
}


def _check_object(value: Any, schema: SchemaNode, path: str) -> None:
    constraints.check_object(value, schema, path, check_type)


_CONSTRAINT_CHECKERS: dict[str, Callable[[Any, SchemaNode, str], None]] = {
    "object": _check_object,
    "string": constraints.check_string,
    "array": constraints.check_array,
    "number": constraints.check_number,
    "integer": constraints.check_integer,
}


def check_type(value: Any, schema: SchemaNode, path: str) -> None:
    """
    Validate ``value`` against ``schema`` at ``path``.

    Raises:
        TypeMismatchException: If no declared type accepts the value.
        ValidationException: Whatever the matched type's constraints raise.
    """
    declared = schema.declared_types()
    for type_name in declared:
        predicate = TYPE_PREDICATES.get(type_name)
        if predicate is None:
            return
        if predicate(value):
            checker = _CONSTRAINT_CHECKERS.get(type_name)
            if checker is not None:
                checker(value, schema, path)
            return

    raise TypeMismatchException(path, declared)

"""
JSON Validator.

Fail-fast validation of decoded JSON values against draft-03 JSON Schemas.
"""

from jsonvalidator.exceptions import (
    AboveMaximumException,
    AdditionalPropertiesException,
    BelowMinimumException,
    DocumentException,
    DuplicateItemsException,
    EnumMismatchException,
    JsonValidatorException,
    MissingRequiredException,
    PatternMismatchException,
    SchemaException,
    SchemaNotFoundException,
    TooFewItemsException,
    TooLongException,
    TooManyItemsException,
    TooShortException,
    TypeMismatchException,
    ValidationException,
)
from jsonvalidator.loader import load_document, load_schema
from jsonvalidator.schemas import ErrorDetail, ErrorResponse, SchemaNode, to_error_response
from jsonvalidator.validator import Validator

__version__ = "0.1.0"

__all__ = [
    "AboveMaximumException",
    "AdditionalPropertiesException",
    "BelowMinimumException",
    "DocumentException",
    "DuplicateItemsException",
    "EnumMismatchException",
    "ErrorDetail",
    "ErrorResponse",
    "JsonValidatorException",
    "MissingRequiredException",
    "PatternMismatchException",
    "SchemaException",
    "SchemaNode",
    "SchemaNotFoundException",
    "TooFewItemsException",
    "TooLongException",
    "TooManyItemsException",
    "TooShortException",
    "TypeMismatchException",
    "ValidationException",
    "Validator",
    "__version__",
    "load_document",
    "load_schema",
    "to_error_response",
]

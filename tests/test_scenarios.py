"""End-to-end validation scenarios."""

import pytest

from jsonvalidator import (
    AdditionalPropertiesException,
    DuplicateItemsException,
    EnumMismatchException,
    MissingRequiredException,
    TooShortException,
    Validator,
)

NAME_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": "string", "minLength": 2, "maxLength": 3, "required": True},
    },
    "additionalProperties": False,
}

TAGS_SCHEMA = {
    "type": "array",
    "minItems": 2,
    "maxItems": 3,
    "uniqueItems": True,
    "enum": ["foo", "bar"],
}


class TestNameScenario:
    """Object with one required, length-bounded string."""

    def test_valid(self):
        Validator(NAME_SCHEMA).validate({"name": "AB"})

    def test_too_short(self):
        with pytest.raises(TooShortException):
            Validator(NAME_SCHEMA).validate({"name": "A"})

    def test_missing(self):
        with pytest.raises(MissingRequiredException) as exc_info:
            Validator(NAME_SCHEMA).validate({})
        assert exc_info.value.property_name == "name"
        assert exc_info.value.path == "root"

    def test_extra(self):
        with pytest.raises(AdditionalPropertiesException) as exc_info:
            Validator(NAME_SCHEMA).validate({"name": "AB", "extra": 1})
        assert exc_info.value.extra_keys == ["extra"]


class TestTagsScenario:
    """Array with count, uniqueness and enum constraints."""

    def test_valid(self):
        Validator(TAGS_SCHEMA).validate(["foo", "bar"])

    def test_duplicates(self):
        with pytest.raises(DuplicateItemsException):
            Validator(TAGS_SCHEMA).validate(["foo", "foo"])

    def test_not_in_enum(self):
        with pytest.raises(EnumMismatchException) as exc_info:
            Validator(TAGS_SCHEMA).validate(["foo", "blah"])
        assert exc_info.value.value == "blah"

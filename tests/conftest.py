"""Shared fixtures for the validator test suite."""

import copy
from pathlib import Path

import pytest

MOCK_DIR = Path(__file__).parent / "mock"

TEST_OBJECT = {
    "stringProp": "AB",
    "arrayProp": ["foo", "bar"],
    "numberProp": 1.1,
    "integerProp": 1,
    "booleanProp": False,
    "nullProp": None,
    "anyProp": 1,
    "multiProp": "foo",
    "customProp": "asdf",
    "objectProp": {"foo": "bar"},
}


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Drop cached settings so env overrides in one test never leak."""
    from jsonvalidator.config import get_settings

    for name in ("JSONVALIDATOR_ROOT_NAME", "JSONVALIDATOR_LOG_LEVEL", "JSONVALIDATOR_MAX_FILE_BYTES"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_dir() -> Path:
    return MOCK_DIR


@pytest.fixture
def schema_path() -> Path:
    return MOCK_DIR / "test-schema.json"


@pytest.fixture
def validator(schema_path):
    from jsonvalidator.validator import Validator

    return Validator.from_file(schema_path)


@pytest.fixture
def test_object() -> dict:
    return copy.deepcopy(TEST_OBJECT)

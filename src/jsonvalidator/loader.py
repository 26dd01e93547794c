"""
Schema and document loading.

Reads JSON files from disk and decodes them. The validation engine never
touches the filesystem; everything here happens before a Validator exists.
"""

import json
import logging
from pathlib import Path
from typing import Any

from jsonvalidator.config import get_settings
from jsonvalidator.exceptions import DocumentException, SchemaException, SchemaNotFoundException
from jsonvalidator.schemas import SchemaNode

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    settings = get_settings()
    size = path.stat().st_size
    if size > settings.max_file_bytes:
        raise ValueError(f"file is {size} bytes, limit is {settings.max_file_bytes}")
    return path.read_text(encoding=settings.file_encoding)


def load_schema(path: str | Path) -> SchemaNode:
    """
    Load a schema document from ``path``.

    Raises:
        SchemaNotFoundException: If the file does not exist.
        SchemaException: If the file cannot be read, is not valid JSON, or
            does not describe a usable schema.
    """
    path = Path(path)
    try:
        text = _read_text(path)
    except FileNotFoundError as exc:
        raise SchemaNotFoundException(str(path)) from exc
    except (OSError, ValueError) as exc:
        raise SchemaException(f"Unable to read schema file: {exc}", details={"path": str(path)}) from exc

    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaException(
            "Unable to parse JSON data - syntax error?",
            details={"path": str(path), "line": exc.lineno, "column": exc.colno},
        ) from exc

    logger.debug(f"Loaded schema from {path}")
    return SchemaNode.from_document(document)


def load_document(path: str | Path) -> Any:
    """
    Load and decode the JSON document to validate.

    Raises:
        DocumentException: If the file is missing, unreadable or not valid JSON.
    """
    path = Path(path)
    try:
        text = _read_text(path)
    except FileNotFoundError as exc:
        raise DocumentException("Document file not found", path=str(path)) from exc
    except (OSError, ValueError) as exc:
        raise DocumentException(f"Unable to read document file: {exc}", path=str(path)) from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentException(
            f"Document is not valid JSON ({exc.msg}) at line {exc.lineno} column {exc.colno}",
            path=str(path),
        ) from exc

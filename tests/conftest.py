"""Pytest configuration and fixtures for valtor tests."""
import logging

import pytest
import structlog

from valtor.config import get_settings
from valtor.jsonschema import JSONSchema


@pytest.fixture
def person_document() -> dict:
    """Object schema with required name/age and optional height/email."""
    return {
        "type": "object",
        "properties": {
            "name": {"type": "string", "minLength": 2, "maxLength": 100, "pattern": "^[a-zA-Z ]+$"},
            "age": {"type": "integer", "minimum": 0, "maximum": 150},
            "height": {"type": "number", "minimum": 0.5, "maximum": 3.0},
            "email": {"type": "string", "pattern": r"^.+@.+\..+$"},
        },
        "required": ["name", "age"],
    }


@pytest.fixture
def person_schema(person_document: dict) -> JSONSchema:
    return JSONSchema.model_validate(person_document)


@pytest.fixture
def restore_logging():
    """Undo configure_logging side effects on the root logger and structlog."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

"""
Frontmatter Schema

JSON Schema for MIND.md frontmatter and a validator that reports every
violation with its field path.
"""

from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError

from .errors import FieldError

NAME_PATTERN = r"^[a-z0-9]+(-[a-z0-9]+)*$"
NAME_PATTERN_MESSAGE = "Must be lowercase alphanumeric with hyphens"

FRONTMATTER_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["name", "description"],
    "properties": {
        "name": {
            "type": "string",
            "minLength": 1,
            "maxLength": 64,
            "pattern": NAME_PATTERN,
        },
        "description": {"type": "string", "minLength": 1, "maxLength": 1024},
        "license": {"type": "string"},
        "compatibility": {"type": "string", "maxLength": 500},
        "allowed-tools": {"type": "string"},
        "model": {"type": "string"},
        "metadata": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
    },
}

_VALIDATOR = Draft7Validator(FRONTMATTER_SCHEMA)

_JSON_TYPE_NAMES = {
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
    list: "array",
    dict: "object",
    type(None): "null",
}


def _describe(error: ValidationError) -> str:
    if error.validator == "pattern" and list(error.absolute_path) == ["name"]:
        return NAME_PATTERN_MESSAGE
    if error.validator == "minLength":
        return f"Must be at least {error.validator_value} character(s)"
    if error.validator == "maxLength":
        return f"Must be at most {error.validator_value} characters"
    if error.validator == "type":
        actual = _JSON_TYPE_NAMES.get(type(error.instance), type(error.instance).__name__)
        return f"Expected {error.validator_value}, received {actual}"
    return error.message


def validate_frontmatter(data: Any) -> list[FieldError]:
    """
    Validate decoded frontmatter.

    Returns:
        Every violation as a FieldError, sorted by path. Empty when valid.
    """
    if not isinstance(data, dict):
        return [FieldError((), "Frontmatter must be a mapping")]

    errors: list[FieldError] = []
    for error in _VALIDATOR.iter_errors(data):
        # Missing keys are reported per field below, with the field as the path
        if error.validator == "required":
            continue
        path = tuple(str(p) for p in error.absolute_path)
        errors.append(FieldError(path, _describe(error)))

    for key in FRONTMATTER_SCHEMA["required"]:
        if key not in data:
            errors.append(FieldError((key,), "Required"))

    return sorted(errors, key=lambda e: (e.path, e.message))

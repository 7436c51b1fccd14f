from __future__ import annotations

import json
import math

from jsdoc_cli.exceptions import (
    InvalidBooleanError,
    InvalidLiteralError,
    InvalidNumberError,
)

ANY_TYPE = "*"


def is_boolean_type(type_name: str) -> bool:
    return type_name.strip().lower() == "boolean"


def element_type(type_name: str) -> str | None:
    """Return the element type of an array type, or None for non-array types."""
    text = type_name.strip()
    if text.endswith("[]"):
        return text[:-2].strip() or ANY_TYPE
    lowered = text.lower()
    if lowered.startswith("array<") and text.endswith(">"):
        return text[6:-1].strip() or ANY_TYPE
    if lowered == "array":
        return ANY_TYPE
    return None


def is_array_type(type_name: str) -> bool:
    return element_type(type_name) is not None


def _boolean(text: str) -> bool:
    if "-" in text:
        # Flag text such as "--no-verbose" or "-v".
        return not text.lstrip("-").startswith("no-")
    lowered = text.strip().lower()
    if lowered in ("false", "0") or lowered.startswith("no"):
        return False
    if lowered in ("true", "1") or lowered.startswith("yes"):
        return True
    raise InvalidBooleanError(text)


def _number(text: str) -> int | float:
    stripped = text.strip()
    try:
        value: int | float = float(stripped) if "." in stripped else int(stripped)
    except ValueError:
        try:
            value = float(stripped)
        except ValueError:
            raise InvalidNumberError(text) from None
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidNumberError(text)
    return value


def _literal(text: str) -> object:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidLiteralError(text, exc.msg) from exc


def get_value(raw_text: str, type_name: str) -> object:
    """Coerce one raw command-line value to the documented parameter type."""
    lowered = type_name.strip().lower()
    if lowered == "boolean":
        return _boolean(raw_text)
    if lowered == "number":
        return _number(raw_text)
    if lowered == "string":
        return str(raw_text)

    element = element_type(type_name)
    if element is not None:
        text = raw_text.strip()
        if text.startswith("[") and text.endswith("]"):
            value = _literal(text)
            return value if isinstance(value, list) else [value]
        if not text:
            return []
        return [get_value(piece.strip(), element) for piece in text.split(",")]

    if lowered == "object":
        text = raw_text.strip()
        return _literal(text) if text else {}
    return str(raw_text)

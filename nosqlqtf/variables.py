"""Parsing of external variable settings from a test suite configuration."""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from nosqlqtf.files import QtfError

_I32_MIN, _I32_MAX = -(1 << 31), (1 << 31) - 1
_I64_MIN, _I64_MAX = -(1 << 63), (1 << 63) - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")


class JsonNull:
    """The JSON ``null`` value, distinct from an SQL NULL (``None``)."""

    _instance: JsonNull | None = None

    def __new__(cls) -> JsonNull:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "JsonNull()"

    def __bool__(self) -> bool:
        return False


JSON_NULL = JsonNull()


@dataclass
class ExtVariable:
    """An external variable defined in a ``test.config`` file."""

    name: str
    value: Any = None


def _parse_int(text: str, low: int, high: int) -> int | None:
    if not _INT_RE.fullmatch(text):
        return None
    number = int(text)
    return number if low <= number <= high else None


def _parse_float(text: str) -> float | None:
    if not text or "_" in text or text != text.strip():
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _parse_decimal(text: str) -> Decimal | None:
    if "_" in text or text != text.strip():
        return None
    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def _load_json(text: str) -> Any:
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise QtfError(f"invalid JSON value {text}: {exc}") from exc
    return JSON_NULL if parsed is None else parsed


def _parse_typed(value: str) -> Any:
    parts = value.split(":", 2)
    if len(parts) < 3:
        raise QtfError(f"Invalid type in test config: {value}")
    kind, text = parts[1], parts[2]

    if kind == "int":
        result = _parse_int(text, _I32_MIN, _I32_MAX)
    elif kind == "long":
        result = _parse_int(text, _I64_MIN, _I64_MAX)
    elif kind == "number":
        result = _parse_decimal(text)
    elif kind == "json":
        if text.startswith('""'):
            text = text[1:-1]
        return _load_json(text)
    elif kind == "string":
        if text.startswith('"'):
            text = text[1:-1]
        return text
    elif kind == "double":
        result = _parse_float(text)
    elif kind == "boolean":
        result = {"true": True, "false": False}.get(text)
    else:
        raise QtfError(f"unsupported type in bindvar: {value}")

    if result is None:
        raise QtfError(f"cannot parse {text!r} as {kind} in test config: {value}")
    return result


def _infer_numeric(value: str, name: str) -> int | float | Decimal:
    for parse in (
        lambda t: _parse_int(t, _I32_MIN, _I32_MAX),
        lambda t: _parse_int(t, _I64_MIN, _I64_MAX),
        _parse_float,
        _parse_decimal,
    ):
        result = parse(value)
        if result is not None:
            return result
    raise QtfError(f"cannot parse {value} as a numeric value for external variable {name}")


def parse_variables(name: str, value: str) -> ExtVariable:
    """Parse a ``var-<name>=<value>`` setting into an external variable.

    The name has the form ``$name`` or ``type-$name``. The value is either
    ``type:<kind>:<text>`` or a literal whose type is inferred.
    """
    parts = name.split("-")
    var = ExtVariable(name=parts[0] if len(parts) == 1 else parts[1])

    if value in ("", "null"):
        var.value = None
        return var
    if value == "jnull":
        var.value = JSON_NULL
        return var
    if value.startswith("type:"):
        var.value = _parse_typed(value)
        return var

    first, last = value[0], value[-1]
    if first in "0123456789+-":
        var.value = _infer_numeric(value, var.name)
    elif first == '"':
        if len(value) < 2:
            raise QtfError(f"invalid string value {value} for external variable {var.name}")
        var.value = value[1:-1]
    elif first == "{":
        if len(value) < 2 or last != "}":
            raise QtfError(f"invalid JSON value {value} for external variable {var.name}")
        var.value = _load_json(value)
    elif first == "[":
        if len(value) < 2 or last != "]":
            raise QtfError(f"invalid JSON value {value} for external variable {var.name}")
        parsed = _load_json(value)
        if not isinstance(parsed, list):
            raise QtfError(f"Invalid JSON value {value} expected Array, got {parsed!r}")
        var.value = parsed
    elif first in "tT":
        var.value = True
    elif first in "fF":
        var.value = False
    else:
        raise QtfError(f"unsupported value {value} for external variable {var.name}")
    return var
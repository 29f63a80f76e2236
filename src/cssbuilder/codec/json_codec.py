"""JSON helpers: compact encoding and positional-constructor decoding."""

from __future__ import annotations

import dataclasses
import json
import math
from typing import Any, TypeVar

from cssbuilder.config import JsonConfig

T = TypeVar("T")

_DEFAULT_CONFIG = JsonConfig()


class CodecError(ValueError):
    """Raised when JSON text cannot be turned into an instance."""


def _finite(value: Any) -> Any:
    """Replace NaN and infinities with ``None``, recursing into containers."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def _default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _finite(
            {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
        )
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode(value: Any, config: JsonConfig | None = None) -> str:
    """Return the JSON text for *value*.

    Dataclass instances are written as their fields in declaration order.
    Non-finite floats are written as ``null``.
    """
    cfg = config or _DEFAULT_CONFIG
    return json.dumps(
        _finite(value),
        default=_default,
        allow_nan=False,
        separators=cfg.separators,
        ensure_ascii=cfg.ensure_ascii,
        sort_keys=cfg.sort_keys,
        indent=cfg.indent,
    )


def decode(cls: type[T], text: str) -> T:
    """Build a ``cls`` instance from JSON *text*.

    The values of a JSON object (in key order) or the elements of a JSON
    array are passed positionally to ``cls``, so the constructor's parameter
    order must match the serialized key order.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CodecError(f"Invalid JSON: {exc}") from exc

    if isinstance(data, dict):
        values = list(data.values())
    elif isinstance(data, list):
        values = data
    else:
        raise CodecError(
            f"Expected a JSON object or array, got {type(data).__name__}"
        )

    try:
        return cls(*values)
    except TypeError as exc:
        raise CodecError(
            f"Cannot construct {cls.__name__} from {len(values)} value(s): {exc}"
        ) from exc

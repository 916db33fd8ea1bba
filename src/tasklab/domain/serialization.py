"""JSON helpers: compact encoding and typed rehydration.

Encoding uses orjson. Dataclasses are turned into dicts before encoding so
``sort_keys`` applies to their fields as well. Decoding parses into plain
data first and then builds the requested type through a pydantic
``TypeAdapter``, so the result is a real instance of the target class rather
than a plain mapping with borrowed behaviour.
"""

from __future__ import annotations

import dataclasses
from functools import lru_cache
from typing import Any, TypeVar

import orjson
from pydantic import TypeAdapter

T = TypeVar("T")

_BASE_OPTIONS = orjson.OPT_PASSTHROUGH_DATACLASS | orjson.OPT_NON_STR_KEYS


def _encode_fallback(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def get_json(obj: Any, *, sort_keys: bool = False, indent: bool = False) -> str:
    """Return the JSON text of *obj*.

    Output is compact unless *indent* is set, and keeps insertion (or field)
    order unless *sort_keys* is set. Non-string dict keys are written as
    strings. Integers must fit in 64 bits; larger ones raise
    ``orjson.JSONEncodeError`` (a ``TypeError``).

    Example:
        >>> get_json([1, 2, 3])
        '[1,2,3]'
        >>> get_json({"width": 10, "height": 20})
        '{"width":10,"height":20}'
        >>> get_json({"width": 10, "height": 20}, sort_keys=True)
        '{"height":20,"width":10}'
        >>> get_json({1: 2})
        '{"1":2}'
    """
    option = _BASE_OPTIONS
    if sort_keys:
        option |= orjson.OPT_SORT_KEYS
    if indent:
        option |= orjson.OPT_INDENT_2
    return orjson.dumps(obj, default=_encode_fallback, option=option).decode("utf-8")


@lru_cache(maxsize=32)
def _adapter_for(kind: type[Any]) -> TypeAdapter[Any]:
    return TypeAdapter(kind)


def from_json(kind: type[T], json_text: str | bytes) -> T:
    """Decode *json_text* and construct an instance of *kind* from it.

    Only the fields *kind* declares are kept; other keys in the payload are
    dropped. Decoder failures are not wrapped: malformed text raises
    ``orjson.JSONDecodeError`` (a ``ValueError``) and payloads that do not fit
    *kind* raise ``pydantic.ValidationError``.

    Example:
        >>> from tasklab.domain.shapes import Circle
        >>> circle = from_json(Circle, '{"radius":10}')
        >>> circle.radius, circle.get_diameter()
        (10.0, 20.0)
    """
    payload = orjson.loads(json_text)
    return _adapter_for(kind).validate_python(payload)


__all__ = ["from_json", "get_json"]

"""Small object helpers: a rectangle value and a JSON encode/decode pair."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, TypeVar

__all__ = ["Rectangle", "get_json", "from_json"]

T = TypeVar("T")


@dataclass
class Rectangle:
    """A width/height pair that can compute its own area."""

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


def _encode_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if hasattr(value, "__dict__"):
        return vars(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def get_json(value: Any, indent: int | None = None) -> str:
    """Return the compact JSON text of *value*.

    Object keys keep the order in which they were set. Dataclasses and plain
    objects are encoded as their attribute dictionaries.
    """
    if indent is not None:
        return json.dumps(value, indent=indent, default=_encode_default)
    return json.dumps(value, separators=(",", ":"), default=_encode_default)


def from_json(proto: type[T], text: str) -> T:
    """Build an instance of *proto* from JSON text without calling ``__init__``.

    Every key of the decoded JSON object becomes an attribute of the result,
    so the methods of *proto* operate on the decoded data. Arrays and strings
    contribute their indexes ("0", "1", ...) as keys; other values add nothing::

        r = from_json(Rectangle, '{"width":10,"height":20}')
        r.get_area()    # 200
    """
    data = json.loads(text)
    obj = proto.__new__(proto)
    if isinstance(data, (list, str)):
        data = {str(i): item for i, item in enumerate(data)}
    if isinstance(data, dict):
        obj.__dict__.update(data)
    return obj

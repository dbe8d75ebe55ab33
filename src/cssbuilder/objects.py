"""Small object helpers: a rectangle factory and JSON round-tripping."""

from __future__ import annotations

import json
from typing import Any, TypeVar

T = TypeVar("T")


class Rectangle:
    __slots__ = ("height", "width")

    width: float
    height: float

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def __repr__(self) -> str:
        return f"Rectangle(width={self.width!r}, height={self.height!r})"

    def get_area(self) -> float:
        return self.width * self.height


def _to_jsonable(obj: Any) -> Any:
    # Plain objects serialize through their attributes
    if hasattr(obj, "__dict__"):
        return vars(obj)
    slots = getattr(type(obj), "__slots__", None)
    if slots is not None:
        return {name: getattr(obj, name) for name in slots if hasattr(obj, name)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """
    Return the compact JSON representation of obj.

    Example:
        >>> get_json([1, 2, 3])
        '[1,2,3]'
        >>> get_json({"width": 10, "height": 20})
        '{"width":10,"height":20}'
    """
    return json.dumps(obj, separators=(",", ":"), default=_to_jsonable)


def from_json(cls: type[T], text: str) -> T | Any:
    """
    Decode text and attach the decoded members to a new instance of cls.

    The instance is created without calling ``cls.__init__``, so any class
    whose methods only read its attributes works, e.g.
    ``from_json(Rectangle, '{"width":10,"height":20}').get_area() == 200``.
    Values that do not decode to a JSON object are returned unchanged.

    Raises:
        json.JSONDecodeError: If text is not valid JSON
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        return data

    obj = cls.__new__(cls)
    for name, value in data.items():
        setattr(obj, name, value)
    return obj

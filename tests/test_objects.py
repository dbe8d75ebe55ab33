"""Tests for the rectangle factory and JSON helpers."""

from __future__ import annotations

import json
import math

import pytest

from cssbuilder import Rectangle, from_json, get_json


class Circle:
    def __init__(self, radius):
        self.radius = radius

    def get_circumference(self):
        return 2 * math.pi * self.radius


class TestRectangle:
    def test_dimensions_and_area(self):
        rect = Rectangle(10, 20)
        assert rect.width == 10
        assert rect.height == 20
        assert rect.get_area() == 200

    def test_repr(self):
        assert repr(Rectangle(1, 2)) == "Rectangle(width=1, height=2)"


class TestGetJson:
    def test_list(self):
        assert get_json([1, 2, 3]) == "[1,2,3]"

    def test_dict_is_compact(self):
        assert get_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_plain_object(self):
        assert json.loads(get_json(Circle(10))) == {"radius": 10}

    def test_slotted_object(self):
        assert json.loads(get_json(Rectangle(10, 20))) == {"width": 10, "height": 20}

    def test_unserializable(self):
        with pytest.raises(TypeError):
            get_json(object())


class TestFromJson:
    def test_restores_methods(self):
        circle = from_json(Circle, '{"radius":10}')
        assert isinstance(circle, Circle)
        assert circle.radius == 10
        assert circle.get_circumference() == pytest.approx(20 * math.pi)

    def test_rectangle(self):
        rect = from_json(Rectangle, get_json(Rectangle(10, 20)))
        assert isinstance(rect, Rectangle)
        assert rect.get_area() == 200

    def test_non_object_returned_as_is(self):
        assert from_json(Circle, "[1,2,3]") == [1, 2, 3]

    def test_invalid_json(self):
        with pytest.raises(json.JSONDecodeError):
            from_json(Circle, "{radius: 10}")

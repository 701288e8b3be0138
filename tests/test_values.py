"""Tests for sigil_json.values and sigil_json.render."""

import json
from decimal import Decimal

import pytest

from sigil_json import decode, dumps, to_python
from sigil_json.values import VArray, VBool, VNumber, VObject, VString, base64_blob


class TestValues:
    def test_array_equality_ignores_container_type(self):
        assert VArray([VString("a")]) == VArray((VString("a"),))

    def test_values_are_frozen(self):
        with pytest.raises(AttributeError):
            VString("a").value = "b"

    def test_object_get_last_wins(self):
        obj = VObject([("k", VNumber(1)), ("k", VNumber(2))])
        assert obj.get("k") == VNumber(2)
        assert len(obj) == 2

    def test_object_get_default(self):
        assert VObject([]).get("missing") is None

    def test_base64_blob(self):
        blob = base64_blob(b"\xff\x00")
        assert blob.entries == (("base64", VString("/wA=")),)

    def test_str(self):
        assert str(VBool(True)) == "true"
        assert str(VNumber(Decimal("1.5"))) == "1.5"


class TestRender:
    def test_scalars(self):
        assert to_python(VString("x")) == "x"
        assert to_python(VNumber(3)) == 3
        assert to_python(VNumber(Decimal("0.25"))) == 0.25
        assert to_python(VBool(False)) is False

    def test_object_duplicate_keys_last_wins(self):
        obj = VObject([("a", VNumber(1)), ("b", VNumber(2)), ("a", VNumber(3))])
        assert to_python(obj) == {"a": 3, "b": 2}

    def test_not_a_value(self):
        with pytest.raises(TypeError):
            to_python("plain str")

    def test_canonical_json(self):
        [value] = decode(
            b"75:7:headers;61:33:13:Cache-Control,12:no-transform,]"
            b"20:6:Pragma,8:no-cache,]]}"
        )
        assert json.loads(dumps(value)) == {
            "headers": [["Cache-Control", "no-transform"], ["Pragma", "no-cache"]]
        }

    def test_pretty_indent(self):
        out = dumps(VArray([VNumber(1)]))
        assert out == "[\n  1\n]"

    def test_compact(self):
        assert dumps(VObject([("k", VString("é"))]), indent=None) == '{"k": "é"}'

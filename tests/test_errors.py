"""Tests for sigil_json.errors."""

import pytest

from sigil_json.errors import FramingError, SigilJSONError, StructuralError, annotate


def test_chain_outermost_first():
    err = StructuralError("odd number of parts in an object: 1")
    err.add_context("destructuring object")
    err.add_context("reading block 0")
    assert err.chain() == [
        "reading block 0",
        "destructuring object",
        "odd number of parts in an object: 1",
    ]
    assert str(err) == (
        "reading block 0: destructuring object: odd number of parts in an object: 1"
    )

def test_annotate_preserves_type():
    with pytest.raises(StructuralError) as info:
        with annotate("outer"):
            with annotate("inner"):
                raise StructuralError("boom")
    assert info.value.chain() == ["outer", "inner", "boom"]

def test_annotate_wraps_os_error():
    with pytest.raises(FramingError) as info:
        with annotate("reading block 0"):
            raise OSError("pipe closed")
    assert isinstance(info.value.__cause__, OSError)
    assert info.value.chain()[0] == "reading block 0"

def test_annotate_ignores_other_exceptions():
    with pytest.raises(KeyError):
        with annotate("ctx"):
            raise KeyError("x")

def test_base_class():
    assert issubclass(FramingError, SigilJSONError)

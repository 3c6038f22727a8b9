from __future__ import annotations

import pytest

from pyoutline.domain.models import MAX_LEVEL, Indent, Move, Row


def test_row_defaults():
    r = Row(id="x")
    assert (r.text, r.checked, r.level) == ("", False, 0)


def test_rows_compare_by_value_and_hash():
    assert Row(id="x", text="a") == Row(id="x", text="a")
    assert Row(id="x", text="a") != Row(id="x", text="b")
    assert len({Row(id="x"), Row(id="x")}) == 1


def test_row_is_frozen():
    r = Row(id="x")
    with pytest.raises(AttributeError):
        r.level = 2  # type: ignore[misc]


def test_direction_enums_round_trip_from_values():
    assert Indent("in") is Indent.IN
    assert Indent("out") is Indent.OUT
    assert Move("up") is Move.UP
    assert Move("down") is Move.DOWN
    with pytest.raises(ValueError):
        Indent("sideways")


def test_max_level_is_positive():
    assert MAX_LEVEL >= 1

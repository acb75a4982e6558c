import pytest

from fixed8.fixed import Fixed
from fixed8.point import Point


def test_default_point_is_origin():
    p = Point()
    assert p.x == Fixed(0)
    assert p.y == Fixed(0)


def test_coordinates_are_stored_as_fixed():
    p = Point(1.5, -2.25)
    assert p.x == Fixed(1.5)
    assert p.y == Fixed(-2.25)


def test_int_and_float_coordinates_agree():
    assert Point(3, 4) == Point(3.0, 4.0)


def test_accepts_fixed_coordinates():
    assert Point(Fixed(2), Fixed(7.5)) == Point(2, 7.5)


def test_returned_coordinate_is_a_copy():
    p = Point(1, 1)
    x = p.x
    x.increment()
    assert p.x == Fixed(1)
    assert x.raw == p.x.raw + 1


def test_coordinates_cannot_be_reassigned():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = Fixed(5)
    assert p.x == Fixed(1)


def test_source_fixed_not_shared():
    source = Fixed(3)
    p = Point(source, 0)
    source.increment()
    assert p.x == Fixed(3)


def test_equality_and_hash():
    assert Point(1, 2) == Point(1, 2)
    assert not (Point(1, 2) == Point(2, 1))
    assert hash(Point(1, 2)) == hash(Point(1, 2))
    assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


def test_equality_with_other_type_is_false():
    assert (Point(0, 0) == (0, 0)) is False


def test_repr_shows_coordinates():
    assert repr(Point(1.5, -2.25)) == "Point(1.5, -2.25)"


def test_rejects_non_numeric_coordinate():
    with pytest.raises(TypeError):
        Point("1", 2)
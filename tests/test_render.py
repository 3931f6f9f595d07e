from dataclasses import dataclass

import pytest

from mixedset import Set, quote, render


@pytest.mark.parametrize(
    ("item", "text"),
    [
        ("alpha", "alpha"),
        ("", ""),
        ('say "hi"', 'say "hi"'),
        (42, "42"),
        (-7, "-7"),
        (2.7, "2.7"),
        (1e20, "1e+20"),
        (True, "True"),
    ],
)
def test_render(item, text):
    assert render(item) == text


@pytest.mark.parametrize(
    ("item", "text"),
    [
        ("alpha", '"alpha"'),
        ("", '""'),
        ('say "hi"', '"say \\"hi\\""'),
        ("back\\slash", '"back\\\\slash"'),
        ("ünïcode", '"ünïcode"'),
        (42, "42"),
        (2.7, "2.7"),
    ],
)
def test_quote(item, text):
    assert quote(item) == text


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@render.register(Point)
def render_point(item: Point) -> str:
    return f"<{item.x},{item.y}>"


def test_registered_rendering():
    points = Set(Point(2, 1), Point(1, 2), "label")

    assert points.sorted() == ["<1,2>", "<2,1>", "label"]
    assert str(points) == 'Set{"label", <1,2>, <2,1>}'


def test_render_integer_longer_than_str_limit():
    text = render(10**5000 + 42)
    assert len(text) == 5001
    assert text == "1" + "0" * 4997 + "042"


def test_render_negative_integer_longer_than_str_limit():
    text = render(-(10**5000))
    assert text == "-1" + "0" * 5000


def test_str_of_set_with_long_integer():
    assert str(Set(10**5000, "a")) == 'Set{"a", 1' + "0" * 5000 + "}"

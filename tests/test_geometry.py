import pytest

from startengine.geometry import Rect


@pytest.mark.parametrize(
    "point, inside",
    [
        ((10, 10), True),
        ((14, 14), True),
        ((15, 10), False),
        ((10, 15), False),
        ((9, 12), False),
        ((12, 9), False),
    ],
)
def test_contains_edges(point, inside):
    rect = Rect(10, 10, 5, 5)
    assert rect.contains(*point) is inside


def test_empty_rect_contains_nothing():
    rect = Rect(3, 3, 0, 0)
    assert rect.contains(3, 3) is False


def test_rect_is_mutable_and_comparable():
    rect = Rect(1, 2, 3, 4)
    rect.x = 5
    assert rect == Rect(5, 2, 3, 4)
    assert rect.contains(5, 2) is True
    assert rect.contains(1, 2) is False
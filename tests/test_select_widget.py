import pytest

from startengine.errors import StartError
from startengine.select_widget import SelectWidget


class FakeFont:
    def size(self, text):
        return (len(text) * 10, 20)


def make(x=0, y=0):
    return SelectWidget(x, y, FakeFont(), (255, 255, 255, 255), "Race")


def test_first_option_becomes_current():
    widget = make()
    widget.add("Argonian")
    widget.add("Khajiit")
    assert widget.value() == "Argonian"
    assert widget.text_option.text == "<Argonian>"


def test_option_destination_follows_label():
    widget = make(30, 40)
    widget.add("Nord")
    assert widget.option_dst.x == widget.x + widget.label.width + 16
    assert widget.option_dst.y == widget.y
    assert widget.option_dst.w == widget.text_option.width
    assert widget.option_dst.h == widget.text_option.height


def test_option_uses_label_colour():
    widget = make()
    widget.add("Nord")
    assert widget.text_option.color == widget.label.color


def test_next_cycles_and_wraps():
    widget = make()
    for option in ("Redguard", "Nord", "Breton"):
        widget.add(option)
    widget.next()
    assert widget.value() == "Nord"
    widget.next()
    assert widget.value() == "Breton"
    widget.next()
    assert widget.value() == "Redguard"
    assert widget.text_option.text == "<Redguard>"


def test_prev_wraps_to_last():
    widget = make()
    for option in ("Imperial", "Orsimer", "Bosmer"):
        widget.add(option)
    widget.prev()
    assert widget.value() == "Bosmer"
    widget.prev()
    assert widget.value() == "Orsimer"


def test_next_then_prev_round_trip():
    widget = make()
    for option in ("Altmer", "Dunmer"):
        widget.add(option)
    widget.next()
    widget.prev()
    assert widget.value() == "Altmer"


def test_option_rect_resized_on_change():
    widget = make()
    widget.add("A")
    widget.add("Longer")
    widget.next()
    assert widget.option_dst.w == widget.text_option.width
    assert widget.text_option.text == "<Longer>"


def test_navigation_without_options_raises():
    widget = make()
    with pytest.raises(StartError):
        widget.next()
    with pytest.raises(StartError):
        widget.prev()
    with pytest.raises(StartError):
        widget.value()


def test_add_none_raises():
    widget = make()
    with pytest.raises(StartError):
        widget.add(None)


def test_draw_without_options_only_label():
    widget = make(5, 6)
    calls = widget.draw()
    assert len(calls) == 1
    assert calls[0][0] is widget.label
    assert calls[0][2] == widget.area


def test_draw_with_option():
    widget = make()
    widget.add("Nord")
    calls = widget.draw()
    assert len(calls) == 2
    assert calls[1][0] is widget.text_option
    assert calls[1][2] == widget.option_dst
"""Single-line text entry field."""

from __future__ import annotations

from .errors import StartError
from .geometry import Rect
from .widget import Label, Widget

_FIELD_GAP = 16
_EMPTY = "<>"


class TextInput(Widget):
    """A labelled widget followed by an editable field shown as ``<text>``."""

    def __init__(self, x, y, font, color=None, text=""):
        if text is None:
            raise StartError("a text input needs a label")
        super().__init__(x, y, font, color, text)
        self.input = Label(self.label.font, self.label.color, _EMPTY)
        self.curr_pos = 1
        self.ifd = Rect(
            self.x + self.label.width + _FIELD_GAP,
            self.y,
            self.input.width,
            self.input.height,
        )

    def set_position(self, x, y):
        """Move the widget and the input field that follows its label."""
        super().set_position(x, y)
        self.ifd.x = self.x + self.label.width + _FIELD_GAP
        self.ifd.y = self.y

    def _refresh(self, content):
        self.input.text = content
        self.ifd.w = self.input.width
        self.ifd.h = self.input.height

    def type_text(self, text):
        """Insert typed characters before the closing bracket."""
        content = self.input.text
        self.curr_pos += len(text)
        self._refresh(content[:-1] + text + ">")

    def backspace(self):
        """Delete the last typed character, if any."""
        content = self.input.text
        if len(content) != len(_EMPTY):
            self.curr_pos -= 1
            content = content[:-2] + ">"
        self._refresh(content)

    def get_input(self):
        """Return the typed text without the surrounding brackets."""
        return self.input.text[1:-1]

    def clear(self):
        """Empty the field."""
        self.input.text = _EMPTY
        self.curr_pos = 1
        self.ifd.w = self.input.width

    def draw(self, src=None, dst=None):
        """Return draw calls for the label and the input field."""
        self._resize_to(dst)
        return [(self.label, None, self.area), (self.input, None, self.ifd)]
"""Labelled widget that cycles through a list of options."""

from __future__ import annotations

from .errors import StartError
from .geometry import Rect
from .widget import Label, Widget

_OPTION_GAP = 16


class SelectWidget(Widget):
    """A label followed by the current option, shown as ``<option>``.

    The options wrap around in both directions.
    """

    def __init__(self, x, y, font, color=None, text=""):
        if text is None:
            raise StartError("a select widget needs a label")
        super().__init__(x, y, font, color, text)
        self.options = []
        self._index = None
        self.text_option = None
        self.option_dst = Rect()

    def _show_current(self):
        shown = f"<{self.options[self._index]}>"
        if self.text_option is None:
            self.text_option = Label(self.label.font, self.label.color, shown)
        else:
            self.text_option.text = shown
        self.option_dst = Rect(
            self.x + self.label.width + _OPTION_GAP,
            self.y,
            self.text_option.width,
            self.text_option.height,
        )

    def add(self, option):
        """Append an option; the first one added becomes the current option."""
        if option is None:
            raise StartError("an option may not be None")
        self.options.append(option)
        if len(self.options) == 1:
            self._index = 0
            self._show_current()

    def _require_options(self):
        if not self.options:
            raise StartError("the select widget has no options")

    def next(self):
        """Move to the following option, wrapping to the first."""
        self._require_options()
        self._index = (self._index + 1) % len(self.options)
        self._show_current()

    def prev(self):
        """Move to the preceding option, wrapping to the last."""
        self._require_options()
        self._index = (self._index - 1) % len(self.options)
        self._show_current()

    def value(self):
        """Return the current option."""
        self._require_options()
        return self.options[self._index]

    def draw(self, src=None, dst=None):
        """Return draw calls for the label and, if any, the current option."""
        self._resize_to(dst)
        calls = [(self.label, None, self.area if dst is None else dst)]
        if self.options:
            calls.append((self.text_option, None, self.option_dst))
        return calls
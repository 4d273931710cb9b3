"""Base widget with a text label, hit testing, focus and click callbacks."""

from __future__ import annotations

from .errors import NotImplementedDrawError, StartError
from .geometry import Rect

DEFAULT_COLOR = (0, 0, 0, 255)


class Label:
    """A line of text measured with a font.

    The font is any object with a ``size(text)`` method that returns
    ``(width, height)`` in pixels.
    """

    def __init__(self, font, color, text):
        self.font = font
        self.color = tuple(color)
        self.text = text

    @property
    def text(self):
        """The label's text; assigning it re-measures the label."""
        return self._text

    @text.setter
    def text(self, value):
        width, height = self.font.size(value)
        self._text = value
        self.width = int(width)
        self.height = int(height)

    def __repr__(self):
        return f"Label(text={self._text!r}, color={self.color!r})"


class Widget:
    """A positioned, labelled element of a user interface.

    Drawing produces a list of ``(item, src, dst)`` draw calls that a
    rendering backend executes in order.
    """

    def __init__(self, x, y, font, color=None, text=""):
        self.x = x
        self.y = y
        if text is None:
            self.label = None
            self.width = 0
            self.height = 0
        else:
            self.label = Label(font, DEFAULT_COLOR if color is None else color, text)
            self.width = self.label.width
            self.height = self.label.height
        self.on_click = None
        self.is_focused = False

    @property
    def area(self):
        """The rectangle the widget occupies on screen."""
        return Rect(self.x, self.y, self.width, self.height)

    def set_position(self, x, y):
        """Move the widget's top-left corner."""
        self.x = x
        self.y = y

    def _resize_to(self, dst):
        if dst is not None:
            self.width = dst.w
            self.height = dst.h

    def draw(self, src=None, dst=None):
        """Return the draw calls for this widget; a plain widget cannot draw."""
        self._resize_to(dst)
        raise NotImplementedDrawError(f"{type(self).__name__} cannot draw itself")

    def is_hovered(self, cursor_x, cursor_y):
        """Return True when the cursor lies over the widget."""
        return self.area.contains(cursor_x, cursor_y)

    def click(self, cursor_x, cursor_y, pressed, *args):
        """Run the click callback if the button is pressed over the widget.

        The callback receives the widget followed by `args`. Returns True
        when the callback ran.
        """
        if self.on_click is None or not pressed or not self.is_hovered(cursor_x, cursor_y):
            return False
        self.on_click(self, *args)
        return True

    def focus(self):
        """Give the widget input focus."""
        self.is_focused = True

    def unfocus(self):
        """Take input focus away from the widget."""
        self.is_focused = False

    def set_label_color(self, color):
        """Change the colour of the widget's label."""
        if self.label is None:
            raise StartError("the widget has no label")
        self.label.color = tuple(color)
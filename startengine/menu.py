"""Vertical menu that lays out a fixed number of widgets."""

from __future__ import annotations

import enum

from .errors import InvalidRangeError
from .vector2 import Vector2


class Alignment(enum.Enum):
    """Horizontal placement of widgets inside a menu."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    CUSTOM = "custom"


class Menu:
    """A column of widgets with padding and alignment."""

    def __init__(self, num_widgets, position=None):
        self.capacity = max(1, num_widgets)
        self.widgets = []
        self.width = 0
        self.height = 0
        self.px = 0
        self.py = 16
        self.position = Vector2() if position is None else Vector2(position.x, position.y)
        self.alignment = Alignment.CUSTOM
        self.active_widget = -1
        self.active_widget_color = (255, 0, 0, 255)
        self.widget_color = (0, 0, 0, 255)

    def __len__(self):
        return len(self.widgets)

    def pack(self, widget):
        """Add a widget at the bottom of the menu and grow the menu to fit."""
        if len(self.widgets) >= self.capacity:
            raise InvalidRangeError("the menu is full")
        self.widgets.append(widget)
        w, h = widget.width, widget.height
        if len(self.widgets) == 1:
            self.width = w
            self.height = h
        else:
            self.width = self.width + self.px if self.width >= w else w
            self.height += h + self.py

    def set_padding(self, x, y):
        """Set the padding and recompute the menu's height."""
        self.px = x
        self.py = y
        if self.widgets:
            self.height = 0
            for index, widget in enumerate(self.widgets):
                self.height += widget.height
                if index + 1 != self.capacity:
                    self.height += self.py

    def draw(self):
        """Return the draw calls of every widget, top to bottom."""
        return [call for widget in self.widgets for call in widget.draw()]

    def dimensions(self):
        """Return the menu's ``(width, height)``."""
        return self.width, self.height

    def set_position(self, x, y):
        """Move the menu; widgets follow unless the alignment is custom."""
        self.position.x = x
        self.position.y = y
        if self.alignment is not Alignment.CUSTOM:
            self._align()

    def set_alignment(self, alignment):
        """Set the alignment and lay the widgets out again."""
        self.alignment = Alignment(alignment)
        self._align()

    def _align(self):
        y = 0
        for index, widget in enumerate(self.widgets):
            w, h = widget.width, widget.height
            if self.alignment is Alignment.CENTER:
                x = self.position.x + self.width // 2 - w // 2
            elif self.alignment is Alignment.RIGHT:
                x = self.position.x + self.width - w
            else:
                x = self.position.x
            y = self.position.y if index == 0 else y + h + self.py
            widget.set_position(int(x), int(y))
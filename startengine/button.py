"""Clickable button drawn from its label or a texture."""

from __future__ import annotations

from .errors import StartError
from .geometry import Rect
from .widget import Widget


class Button(Widget):
    """A widget drawn as its label, or as a texture when it has no label.

    A texture is any object with ``width`` and ``height``; it is usually an
    atlas shared with other images, so the button never releases it.
    """

    def __init__(self, x, y, font, color=None, text="", texture=None, src=None):
        super().__init__(x, y, font, color, text)
        self.texture = texture
        self.default_src = src
        if texture is not None:
            self.width = texture.width
            self.height = texture.height

    def draw(self, src=None, dst=None):
        """Return the draw calls for the button."""
        self._resize_to(dst)
        dest = self.area
        if self.label is not None:
            return [(self.label, None, dest)]
        if self.texture is None:
            raise StartError("the button has neither a label nor a texture")
        return [
            (
                self.texture,
                self.default_src if src is None else src,
                dest if dst is None else dst,
            )
        ]
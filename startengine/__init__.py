"""Backend-independent building blocks for small 2D games: vectors, rectangles, animations, states, configuration files and widgets."""

__version__ = "0.1.0"
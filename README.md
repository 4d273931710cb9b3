# startengine

Building blocks for small 2D games. Nothing in the package draws pixels,
opens windows or reads devices. Widgets return lists of draw calls, and text
is measured by a font object that you supply, so any rendering backend can
sit underneath.

## Modules

- `startengine.vector2`: `Vector2`, a mutable 2D vector. It supports `+`,
  `-`, multiplication by a number (`v * 2` or `2 * v`), `/` and unary `-`,
  and it can be unpacked with `x, y = v`. `magnitude()` returns its length.
  `normalize()` scales it to unit length in place, and `normalized()` returns
  a unit-length copy. Dividing by zero, or normalizing a zero vector, raises
  `DivideByZeroError`.
- `startengine.geometry`: `Rect(x, y, w, h)`. `contains(x, y)` is true for
  points inside the rectangle. The right and bottom edges are excluded.
- `startengine.animation`: `Animation` and `AnimationAxis` (`X` or `Y`).
  - An animation steps a source rectangle, `frame`, across a sprite sheet.
  - `update(delta_time)` adds to its clock. Once `speed` seconds have passed, it moves to the next frame, wrapping after `num_frames`, and resets the clock.
  - An animation needs at least one frame; fewer raises `ValueError`.
- `startengine.state`: `State` and `StateMachine`.
  - Subclass `State` and override `handle(*args)`, `update(*args)` and `destroy()`.
  - `StateMachine.switch(state)` makes a state active and destroys the state it replaces.
  - `handle` and `update` forward their arguments to the active state. They raise `StartError` when there is no active state or it has been destroyed.
- `startengine.conf`: `parse_string(text)` and `parse_file(filename)` read a hierarchical configuration format and return a `Config`.
  - **Settings:** written `name = value;` or `name: value;`.
  - **Groups:** `{ ... }`.
  - **Arrays:** `[ ... ]`, which hold scalars of a single kind.
  - **Lists:** `( ... )`.
  - **Values:** integers in decimal, hex `0x`, binary `0b` or octal `0o`, with an optional `L`/`LL` suffix; floats; `true`/`false`; strings in double quotes, where adjacent strings are joined.
  - **Comments:** `#`, `//` and `/* */`.
  - `Config.lookup(path)` follows a path such as `application.books.[0].price`. Path parts may be separated by `.`, `:` or `/`, and `[n]` indexes a list, an array or a group.
  - `Config.extract(path, type)` also checks that the value matches a `SettingType`: `INT` (32-bit), `INT64`, `FLOAT`, `BOOLEAN` or `STRING`.
  - A missing setting, or one of the wrong type, raises `ItemNotFoundError`, and an unknown type raises `UnknownTypeError`.
  - Unreadable files and syntax errors raise `ConfigError`. It carries `message`, `line` and `filename`.
- `startengine.widget`: `Label` and `Widget`.
  - `Label(font, color, text)` measures its text with `font.size(text)`, which must return `(width, height)`. It measures the text again whenever `text` is assigned.
  - `Widget(x, y, font, color=None, text="")` is sized to its label. Its methods are `set_position`, `is_hovered(cursor_x, cursor_y)`, `focus`, `unfocus`, `set_label_color` and `click(cursor_x, cursor_y, pressed, *args)`.
  - `click` calls `on_click(widget, *args)` when `pressed` is true and the cursor is over the widget, and returns whether it did.
  - A plain `Widget` cannot draw, so its `draw` raises `NotImplementedDrawError`.
- `startengine.button`: `Button`, a widget that draws its label. With no label it draws a texture instead: any object with `width` and `height`.
- `startengine.text_input`: `TextInput`, a label followed by a field shown as `<text>`. Its methods are `type_text(text)`, `backspace()`, `get_input()` (the text without brackets), `clear()` and `set_position`.
- `startengine.select_widget`: `SelectWidget`, a label followed by the current option shown as `<option>`. Its methods are `add(option)`, `next()`, `prev()` and `value()`; `next()` and `prev()` wrap around.
- `startengine.menu`: `Menu` and `Alignment` (`LEFT`, `CENTER`, `RIGHT`, `CUSTOM`).
  - A menu holds a fixed number of widgets. `pack(widget)` adds one and raises `InvalidRangeError` when the menu is full.
  - `len(menu)`, `dimensions()`, `set_padding(x, y)`, `set_position(x, y)` and `set_alignment(alignment)` lay the widgets out in a column.
  - `draw()` collects every widget's draw calls.
- `startengine.errors`: every error is a subclass of `StartError`. They are `ItemNotFoundError`, `UnknownTypeError`, `InvalidRangeError`, `DivideByZeroError`, `NotImplementedDrawError` and `ConfigError`.

Widgets' `draw(src=None, dst=None)` methods return a list of
`(item, src, dst)` tuples. `item` is a `Label` or a texture, and `dst` is a
`Rect`. Your renderer executes the tuples in order.

## Install

```
pip install .
```

## Examples

```python
from startengine.vector2 import Vector2
from startengine.animation import Animation, AnimationAxis

v = Vector2(3.0, 4.0)
print(v.magnitude())        # 5.0
print(v.normalized())       # Vector2(x=0.6, y=0.8)

run = Animation(None, 0, 0, 8, 100, 100, AnimationAxis.X)
run.speed = 1 / 8
run.update(0.2)
print(run.frame)            # Rect(x=100, y=0, w=100, h=100)
```

```python
from startengine.conf import parse_string, SettingType

config = parse_string('''
version = "1.0";
application: { window: { size: { w = 640; h = 480; }; }; };
''')
print(config.extract("application.window.size.w", SettingType.INT))  # 640
```

```python
from startengine.button import Button
from startengine.menu import Alignment, Menu
from startengine.text_input import TextInput
from startengine.vector2 import Vector2


class MonoFont:
    def size(self, text):
        return 8 * len(text), 16


font = MonoFont()
menu = Menu(2, Vector2(10, 10))
menu.pack(Button(0, 0, font, text="Start"))
menu.pack(Button(0, 0, font, text="Quit"))
menu.set_alignment(Alignment.CENTER)
for item, src, dst in menu.draw():
    print(item.text, dst)

field = TextInput(0, 100, font, text="Name")
field.type_text("abc")
print(field.get_input())    # abc
```

## What it does not do

The package has no renderer, window, font loading, image loading, input
polling or main loop. You supply fonts and textures as plain objects, pass
cursor positions and button presses in yourself, and execute the draw calls
with a graphics library of your choice.

## Tests

```
pip install .[test]
pytest
```
"""Reading hierarchical configuration files and extracting typed values."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError, ItemNotFoundError, UnknownTypeError

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_NAME = re.compile(r"[A-Za-z*][-A-Za-z0-9_*]*")
_BOOL = re.compile(r"(?:true|false)(?![-A-Za-z0-9_*])", re.IGNORECASE)
_FLOAT = re.compile(r"[-+]?(?:(?:\d+\.\d*|\.\d+)(?:[eE][-+]?\d+)?|\d+[eE][-+]?\d+)")
_HEX = re.compile(r"0[xX]([0-9A-Fa-f]+)(?:LL?)?")
_BIN = re.compile(r"0[bB]([01]+)(?:LL?)?")
_OCT = re.compile(r"0[oOqQ]([0-7]+)(?:LL?)?")
_DEC = re.compile(r"[-+]?\d+(?:LL?)?")
_HEX_BYTE = re.compile(r"[0-9A-Fa-f]{2}")
_INDEX = re.compile(r"\[(\d+)\]")
_PATH_SEPARATORS = re.compile(r"[:./]")
_ESCAPES = {"\\": "\\", '"': '"', "n": "\n", "t": "\t", "r": "\r", "f": "\f"}


class SettingType(enum.IntEnum):
    """Value types that can be extracted from a configuration."""

    INT = 0
    INT64 = 1
    FLOAT = 2
    BOOLEAN = 3
    STRING = 4


def _matches(value, setting_type):
    is_int = isinstance(value, int) and not isinstance(value, bool)
    if setting_type is SettingType.INT:
        return is_int and _INT32_MIN <= value <= _INT32_MAX
    if setting_type is SettingType.INT64:
        return is_int
    if setting_type is SettingType.FLOAT:
        return isinstance(value, float)
    if setting_type is SettingType.BOOLEAN:
        return isinstance(value, bool)
    return isinstance(value, str)


def _kind(value):
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    return "string"


@dataclass
class Config:
    """A parsed configuration: groups are dicts, lists and arrays are lists."""

    root: dict[str, Any] = field(default_factory=dict)

    def lookup(self, path):
        """Return the setting at a dotted path such as ``a.b.[0].c``."""
        node: Any = self.root
        for part in filter(None, _PATH_SEPARATORS.split(path)):
            index = _INDEX.fullmatch(part)
            if index:
                position = int(index.group(1))
                if isinstance(node, dict):
                    items = list(node.values())
                elif isinstance(node, list):
                    items = node
                else:
                    raise ItemNotFoundError(f"setting {path!r} not found")
                if position >= len(items):
                    raise ItemNotFoundError(f"setting {path!r} not found")
                node = items[position]
            elif isinstance(node, dict) and part in node:
                node = node[part]
            else:
                raise ItemNotFoundError(f"setting {path!r} not found")
        return node

    def extract(self, path, type):
        """Return the value at `path`, which must be of the given SettingType."""
        try:
            setting_type = SettingType(type)
        except (ValueError, TypeError) as exc:
            raise UnknownTypeError(f"unknown setting type {type!r}") from exc
        value = self.lookup(path)
        if not _matches(value, setting_type):
            raise ItemNotFoundError(f"setting {path!r} is not of type {setting_type.name}")
        return value


class _Parser:
    def __init__(self, text, filename=None):
        self._text = text
        self._pos = 0
        self._filename = filename

    def parse(self):
        return self._group_body(None)

    def _error(self, message):
        line = self._text.count("\n", 0, self._pos) + 1
        return ConfigError(message, line=line, filename=self._filename)

    def _peek(self):
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _skip(self):
        text = self._text
        while self._pos < len(text):
            ch = text[self._pos]
            if ch.isspace():
                self._pos += 1
            elif ch == "#" or text.startswith("//", self._pos):
                end = text.find("\n", self._pos)
                self._pos = len(text) if end < 0 else end
            elif text.startswith("/*", self._pos):
                end = text.find("*/", self._pos + 2)
                if end < 0:
                    raise self._error("unterminated comment")
                self._pos = end + 2
            else:
                break

    def _group_body(self, closing):
        settings: dict[str, Any] = {}
        while True:
            self._skip()
            ch = self._peek()
            if not ch:
                if closing is not None:
                    raise self._error("syntax error")
                return settings
            if ch == closing:
                self._pos += 1
                return settings
            match = _NAME.match(self._text, self._pos)
            if not match:
                raise self._error("syntax error")
            name = match.group()
            if name in settings:
                raise self._error("duplicate setting name")
            self._pos = match.end()
            self._skip()
            if self._peek() not in ("=", ":"):
                raise self._error("syntax error")
            self._pos += 1
            settings[name] = self._value()
            self._skip()
            if self._peek() in (";", ","):
                self._pos += 1

    def _value(self):
        self._skip()
        ch = self._peek()
        if ch == "{":
            self._pos += 1
            return self._group_body("}")
        if ch == "(":
            self._pos += 1
            return self._sequence(")", scalars_only=False)
        if ch == "[":
            self._pos += 1
            items = self._sequence("]", scalars_only=True)
            if len({_kind(item) for item in items}) > 1:
                raise self._error("mismatched element type in array")
            return items
        return self._scalar()

    def _sequence(self, closing, scalars_only):
        items = []
        self._skip()
        if self._peek() == closing:
            self._pos += 1
            return items
        while True:
            self._skip()
            items.append(self._scalar() if scalars_only else self._value())
            self._skip()
            ch = self._peek()
            if ch == ",":
                self._pos += 1
                self._skip()
                if self._peek() == closing:
                    self._pos += 1
                    return items
            elif ch == closing:
                self._pos += 1
                return items
            else:
                raise self._error("syntax error")

    def _scalar(self):
        if self._peek() == '"':
            return self._string()
        text, pos = self._text, self._pos
        if match := _BOOL.match(text, pos):
            self._pos = match.end()
            return match.group().lower() == "true"
        if match := _FLOAT.match(text, pos):
            self._pos = match.end()
            return float(match.group())
        for pattern, base in ((_HEX, 16), (_BIN, 2), (_OCT, 8)):
            if match := pattern.match(text, pos):
                self._pos = match.end()
                return int(match.group(1), base)
        if match := _DEC.match(text, pos):
            self._pos = match.end()
            return int(match.group().rstrip("L"))
        raise self._error("syntax error")

    def _string(self):
        text = self._text
        parts = []
        while True:
            self._pos += 1
            while True:
                if self._pos >= len(text):
                    raise self._error("unterminated string")
                ch = text[self._pos]
                if ch == '"':
                    self._pos += 1
                    break
                if ch != "\\":
                    parts.append(ch)
                    self._pos += 1
                    continue
                escape = text[self._pos + 1 : self._pos + 2]
                if escape in _ESCAPES:
                    parts.append(_ESCAPES[escape])
                    self._pos += 2
                elif escape == "x" and _HEX_BYTE.fullmatch(text[self._pos + 2 : self._pos + 4]):
                    parts.append(chr(int(text[self._pos + 2 : self._pos + 4], 16)))
                    self._pos += 4
                else:
                    raise self._error("invalid escape sequence")
            self._skip()
            if self._peek() != '"':
                return "".join(parts)


def parse_string(text):
    """Parse configuration text into a Config."""
    return Config(_Parser(text).parse())


def parse_file(filename):
    """Read and parse a configuration file."""
    name = str(filename)
    try:
        text = Path(filename).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"file I/O error - {exc.strerror or exc}", filename=name) from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"file I/O error - {exc}", filename=name) from exc
    return Config(_Parser(text, name).parse())
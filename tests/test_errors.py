import pytest

from startengine.errors import (
    ConfigError,
    DivideByZeroError,
    InvalidRangeError,
    ItemNotFoundError,
    NotImplementedDrawError,
    StartError,
    UnknownTypeError,
)


def test_config_error_with_line_and_file():
    err = ConfigError("syntax error", line=4, filename="game.cfg")
    assert str(err) == "syntax error on line 4 in game.cfg"
    assert err.line == 4
    assert err.filename == "game.cfg"
    assert err.message == "syntax error"


def test_config_error_with_line_only():
    err = ConfigError("syntax error", line=2)
    assert str(err) == "syntax error on line 2"
    assert err.filename is None


def test_config_error_without_line_keeps_message():
    err = ConfigError("file I/O error - missing", filename="x.cfg")
    assert str(err) == "file I/O error - missing"
    assert err.line is None
    assert err.filename == "x.cfg"


@pytest.mark.parametrize(
    "cls",
    [
        ItemNotFoundError,
        UnknownTypeError,
        InvalidRangeError,
        DivideByZeroError,
        NotImplementedDrawError,
        ConfigError,
    ],
)
def test_every_error_derives_from_start_error(cls):
    err = cls("boom")
    assert issubclass(cls, StartError) is True
    assert isinstance(err, StartError) is True
    assert str(err) == "boom"


@pytest.mark.parametrize(
    "cls, base",
    [
        (ItemNotFoundError, LookupError),
        (UnknownTypeError, TypeError),
        (InvalidRangeError, IndexError),
        (DivideByZeroError, ZeroDivisionError),
        (NotImplementedDrawError, NotImplementedError),
    ],
)
def test_errors_derive_from_builtin_bases(cls, base):
    err = cls("detail")
    assert issubclass(cls, base) is True
    assert isinstance(err, base) is True
    assert str(err) == "detail"


def test_unrelated_errors_do_not_share_builtin_bases():
    with pytest.raises(ItemNotFoundError) as excinfo:
        try:
            raise ItemNotFoundError("missing")
        except ZeroDivisionError:
            pass
    assert str(excinfo.value) == "missing"
    assert isinstance(excinfo.value, ZeroDivisionError) is False

    with pytest.raises(DivideByZeroError) as divide_info:
        try:
            raise DivideByZeroError("zero")
        except LookupError:
            pass
    assert str(divide_info.value) == "zero"

    config = ConfigError("bad", line=1)
    assert str(config) == "bad on line 1"
    assert config.line == 1
    assert isinstance(config, TypeError) is False
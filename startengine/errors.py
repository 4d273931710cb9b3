"""Exception hierarchy shared by the engine's modules."""


class StartError(Exception):
    """Base class for every error the engine raises."""


class ItemNotFoundError(StartError, LookupError):
    """A requested item does not exist or has a different type."""


class UnknownTypeError(StartError, TypeError):
    """A value of an unsupported or mismatched type was given."""


class InvalidRangeError(StartError, IndexError):
    """A value lies outside the permitted range."""


class DivideByZeroError(StartError, ZeroDivisionError):
    """An operation would divide by zero."""


class NotImplementedDrawError(StartError, NotImplementedError):
    """An object has no way of drawing itself."""


class ConfigError(StartError):
    """A configuration file could not be read or parsed."""

    def __init__(self, message, line=None, filename=None):
        self.message = message
        self.line = line
        self.filename = filename
        text = message
        if line is not None:
            text = f"{message} on line {line}"
            if filename:
                text += f" in {filename}"
        super().__init__(text)
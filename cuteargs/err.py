from typing import Any


class Error(RuntimeError):
    """
    Base class for every error raised by cuteargs.

    Custom value parsers can raise it directly with a free-form message.
    """

    pass


class ArgumentError(Error):
    """
    A consuming option was matched but the token stream ended before
    its value.

    Attributes:
        name: The registered name of the option.
    """

    def __init__(self, name: str):
        super().__init__(f"Expected value for argument '{name}'")
        self.name = name


class MissingValueError(Error, LookupError):
    """
    No value is stored for a state, or a decoder that needs a value
    was given none.

    Attributes:
        state: The state that was looked up, or None when raised by a decoder.
    """

    def __init__(self, state: Any = None):
        if state is None:
            super().__init__("Expected value, found none")
        else:
            super().__init__(f"No value for {state!r}")
        self.state = state


class DecodeError(Error, ValueError):
    """
    A stored value could not be converted to the requested type.

    Attributes:
        text: The offending raw value.
        typeName: The name of the target type.
    """

    def __init__(self, text: str, typeName: str):
        super().__init__(f"Can not parse '{text}' as {typeName}")
        self.text = text
        self.typeName = typeName

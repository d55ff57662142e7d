import dataclasses as dt

from collections.abc import Hashable
from typing import Generic, Optional, Protocol, TypeVar, runtime_checkable

S = TypeVar("S", bound=Hashable)


# --- Match ------------------------------------------------------------------ #


@dt.dataclass(frozen=True)
class Match:
    """
    A successful match of a token against an option.

    Attributes:
        value: The inline value given with `name=value`, or None for a bare `name`.
    """

    value: Optional[str] = None


def matchArg(name: str, arg: str) -> Optional[Match]:
    """
    Matches a single token against an option name.

    A token containing `=` is split on the first `=` and matches only if
    the left part equals the name, the right part becoming the inline
    value. Any other token matches only if it equals the name.

    Args:
        name: The option name.
        arg: The token to test.

    Returns:
        A `Match`, or None if the token does not match.
    """
    key, sep, value = arg.partition("=")
    if sep:
        return Match(value) if key == name else None
    return Match() if arg == name else None


# --- Options ---------------------------------------------------------------- #


@runtime_checkable
class StateOpt(Protocol[S]):
    """
    What the parser needs from an option.

    `consume` tells whether the option takes a value, and `match` decides
    whether a token selects the option.
    """

    @property
    def name(self) -> str: ...

    @property
    def state(self) -> S: ...

    @property
    def consume(self) -> bool: ...

    def match(self, arg: str) -> Optional[Match]: ...


@dt.dataclass(frozen=True)
class Opt(Generic[S]):
    """
    A command-line option bound to a state.

    Attributes:
        name: The literal token that selects the option (e.g. "--file", "/?").
        state: The tag the option's values are stored under.
        consume: True if the option takes a value, False for a switch.
    """

    name: str
    state: S
    consume: bool = True

    def match(self, arg: str) -> Optional[Match]:
        return matchArg(self.name, arg)


def switch(name: str, state: S) -> Opt[S]:
    """Creates an option that doesn't consume a value."""
    return Opt(name, state, False)


def option(name: str, state: S) -> Opt[S]:
    """Creates an option that consumes a value."""
    return Opt(name, state, True)

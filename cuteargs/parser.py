import os
import sys
import logging

from typing import Any, Generic, Iterable, Optional

from . import const, val
from .err import ArgumentError, MissingValueError
from .opt import S, Opt, StateOpt

_logger = logging.getLogger(__name__)


class Parser(Generic[S]):
    """
    Matches command-line tokens against registered options and keeps the
    raw values they produced, keyed by state.

    Every option is tested against every token, so a single token can
    feed several options registered under different states.
    """

    _opts: list[StateOpt[S]]
    _values: dict[S, list[str]]

    def __init__(self):
        self._opts = []
        self._values = {}

    # --- Registry ----------------------------------------------------------- #

    def add(self, opt: StateOpt[S]) -> "Parser[S]":
        """
        Registers an option.

        Args:
            opt: The option to add, anything implementing `StateOpt`.

        Returns:
            The parser itself, so calls can be chained.
        """
        _logger.debug(f"Registering option '{opt.name}' for {opt.state!r}")
        self._opts.append(opt)
        return self

    def register(self, name: str, state: S, consume: bool = True) -> "Parser[S]":
        """Registers an `Opt` built from its parts."""
        return self.add(Opt(name, state, consume))

    def opts(self) -> list[StateOpt[S]]:
        return list(self._opts)

    def get(self, state: S) -> Optional[StateOpt[S]]:
        """Returns the first option registered for `state`, if any."""
        for opt in self._opts:
            if opt.state == state:
                return opt
        return None

    def has(self, state: S) -> bool:
        return any(opt.state == state for opt in self._opts)

    # --- Values ------------------------------------------------------------- #

    def value(self, state: S, typ: Any = bool) -> Any:
        """
        Decodes the first value stored for a state.

        Args:
            state: The state to look up.
            typ: The type to decode into, see `val.decoderFor`.

        Returns:
            The decoded value.

        Raises:
            MissingValueError: If nothing is stored and `typ` needs a value.
            DecodeError: If the stored value is not valid for `typ`.
        """
        values = self._values.get(state)
        return val.parse(typ, values[0] if values else None)

    def popRawValue(self, state: S) -> str:
        """Removes and returns the most recent value stored for a state."""
        values = self._values.get(state)
        if not values:
            raise MissingValueError(state)
        return values.pop()

    def rawValues(self, state: S) -> list[str]:
        """Returns every value stored for a state, in the order they were given."""
        if state not in self._values:
            raise MissingValueError(state)
        return list(self._values[state])

    # --- Parsing ------------------------------------------------------------ #

    def parse(self, args: Iterable[Any]) -> list[str]:
        """
        Parses command-line arguments.

        The tokens are read once, front to back. A consuming option given
        without an inline value takes the following token as its value,
        and that token is not matched against anything else.

        Args:
            args: The tokens to parse, each converted with `str()`.

        Returns:
            The tokens that matched no option, in their original order.

        Raises:
            ArgumentError: If a consuming option has no value. Nothing is
                stored in that case.
        """
        it = map(str, iter(args))
        found: dict[S, list[str]] = {}
        rest: list[str] = []

        for arg in it:
            matched = False

            for opt in self._opts:
                m = opt.match(arg)
                if m is None:
                    continue
                matched = True

                value = ""
                if opt.consume:
                    if m.value is not None:
                        value = m.value
                    else:
                        nextArg = next(it, None)
                        if nextArg is None:
                            _logger.debug(f"Missing value for '{opt.name}'")
                            raise ArgumentError(opt.name)
                        value = nextArg

                _logger.debug(f"Matched '{arg}' as '{opt.name}' = '{value}'")
                found.setdefault(opt.state, []).append(value)

            if not matched:
                _logger.debug(f"Unmatched argument '{arg}'")
                rest.append(arg)

        for state, values in found.items():
            self._values.setdefault(state, []).extend(values)

        _logger.info(
            f"Parsed {sum(map(len, found.values()))} value(s), {len(rest)} argument(s) left"
        )
        return rest

    def parseEnv(self) -> list[str]:
        """
        Parses the process arguments, `argv[0]` included.

        Space-separated tokens from the `CUTEARGS_EXTRA_ARGS` environment
        variable are inserted after `argv[0]`.
        """
        extra = os.environ.get(const.EXTRA_ARGS_ENV, None)
        if extra:
            _logger.info(f"Using extra arguments from {const.EXTRA_ARGS_ENV}: {extra}")
        args = sys.argv[:1] + (extra.split() if extra else []) + sys.argv[1:]
        return self.parse(args)

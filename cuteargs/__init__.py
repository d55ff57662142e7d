from . import const, err, opt, val  # noqa: F401 re-exported as submodules

from .err import ArgumentError, DecodeError, Error, MissingValueError
from .opt import Match, Opt, StateOpt, matchArg, option, switch
from .parser import Parser
from .val import (
    FloatType,
    IntType,
    ValueParser,
    float64,
    int8,
    int16,
    int32,
    int64,
    int128,
    isize,
    uint8,
    uint16,
    uint32,
    uint64,
    uint128,
    usize,
)

__all__ = [
    "ArgumentError",
    "DecodeError",
    "Error",
    "MissingValueError",
    "Match",
    "Opt",
    "StateOpt",
    "matchArg",
    "option",
    "switch",
    "Parser",
    "FloatType",
    "IntType",
    "ValueParser",
    "float64",
    "int8",
    "int16",
    "int32",
    "int64",
    "int128",
    "isize",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "uint128",
    "usize",
    "ensure",
]


def ensure(version: tuple[int, int, int]):
    if (
        const.VERSION[0] == version[0]
        and const.VERSION[1] == version[1]
        and const.VERSION[2] >= version[2]
    ):
        return

    raise RuntimeError(
        f"Expected cuteargs version {version[0]}.{version[1]}.{version[2]} but found {const.VERSION_STR}"
    )

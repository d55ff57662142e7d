import re
import inspect
import struct
import dataclasses as dt

from collections.abc import Hashable
from pathlib import Path, PurePath
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from .err import DecodeError, MissingValueError

Decoder = Callable[[Optional[str]], Any]


@runtime_checkable
class ValueParser(Protocol):
    """
    Anything that can turn a raw option value into a typed one.

    `parse` receives the raw value, or None when the option was never
    given, and either returns the decoded value or raises an `err.Error`.
    """

    def parse(self, val: Optional[str]) -> Any: ...


def valueOrErr(val: Optional[str]) -> str:
    """
    Converts an optional raw value into a required one.

    Raises:
        MissingValueError: If `val` is None.
    """
    if val is None:
        raise MissingValueError()
    return val


# --- Numbers ---------------------------------------------------------------- #

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

# Enough for any 128-bit value, longer literals always overflow.
_MAX_DIGITS = 39


@dt.dataclass(frozen=True)
class IntType:
    """
    A fixed-width integer type.

    Attributes:
        name: The type name used in error messages (e.g. "int32").
        bits: The width in bits.
        signed: True for two's complement, False for unsigned.
    """

    name: str
    bits: int
    signed: bool

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def parse(self, val: Optional[str]) -> int:
        text = valueOrErr(val)
        pattern = _SIGNED_RE if self.signed else _UNSIGNED_RE
        if not pattern.fullmatch(text):
            raise DecodeError(text, self.name)

        digits = text.lstrip("+-").lstrip("0") or "0"
        if len(digits) > _MAX_DIGITS:
            raise DecodeError(text, self.name)

        n = -int(digits) if text.startswith("-") else int(digits)
        if n < self.min or n > self.max:
            raise DecodeError(text, self.name)
        return n


@dt.dataclass(frozen=True)
class FloatType:
    """A floating point type, only `float64` exists."""

    name: str

    def parse(self, val: Optional[str]) -> float:
        text = valueOrErr(val)
        if not _FLOAT_RE.fullmatch(text):
            raise DecodeError(text, self.name)
        return float(text)


_POINTER_BITS = struct.calcsize("P") * 8

int8 = IntType("int8", 8, True)
int16 = IntType("int16", 16, True)
int32 = IntType("int32", 32, True)
int64 = IntType("int64", 64, True)
int128 = IntType("int128", 128, True)
uint8 = IntType("uint8", 8, False)
uint16 = IntType("uint16", 16, False)
uint32 = IntType("uint32", 32, False)
uint64 = IntType("uint64", 64, False)
uint128 = IntType("uint128", 128, False)
isize = IntType("isize", _POINTER_BITS, True)
usize = IntType("usize", _POINTER_BITS, False)
float64 = FloatType("float64")


# --- Decoders --------------------------------------------------------------- #


def _parseBool(val: Optional[str]) -> bool:
    return val is not None


def _parseStr(val: Optional[str]) -> str:
    return valueOrErr(val)


def _parsePath(val: Optional[str]) -> Path:
    return Path(valueOrErr(val))


def _parsePurePath(val: Optional[str]) -> PurePath:
    return PurePath(valueOrErr(val))


DECODERS: dict[Any, Decoder] = {
    bool: _parseBool,
    str: _parseStr,
    Path: _parsePath,
    PurePath: _parsePurePath,
    int: int64.parse,
    float: float64.parse,
}


def decoderFor(typ: Any) -> Decoder:
    """
    Looks up the decoder for a type.

    Args:
        typ: One of the keys of `DECODERS`, an integer or float type from
            this module, or any `ValueParser`. A class must provide `parse`
            as a static or class method.

    Raises:
        TypeError: If nothing knows how to decode `typ`.
    """
    if isinstance(typ, Hashable) and typ in DECODERS:
        return DECODERS[typ]
    if isinstance(typ, ValueParser):
        # A class only works with a static or class level `parse`.
        if inspect.isclass(typ) and not isinstance(
            inspect.getattr_static(typ, "parse"), (staticmethod, classmethod)
        ):
            raise TypeError(f"No value parser for {typ!r}")
        return typ.parse
    raise TypeError(f"No value parser for {typ!r}")


def parse(typ: Any, val: Optional[str]) -> Any:
    """
    Decodes a raw option value.

    Args:
        typ: The type to decode into, see `decoderFor`.
        val: The raw value, or None if the option was never given.

    Returns:
        The decoded value.

    Raises:
        MissingValueError: If `val` is None and the type needs a value.
        DecodeError: If `val` is not a valid literal for the type.
    """
    return decoderFor(typ)(val)

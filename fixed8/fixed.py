"""Signed fixed-point numbers with eight fractional bits."""

from __future__ import annotations

import math
import struct
from typing import Union

FRACTIONAL_BITS = 8
_SCALE = 1 << FRACTIONAL_BITS

_debug = False

Number = Union[int, float]


def set_debug(mode: bool) -> None:
    """Switch construction tracing on stdout on or off."""
    global _debug
    _debug = bool(mode)


def _trace(message: str) -> None:
    if _debug:
        print(message)


def _f32(value: float) -> float:
    """Round a Python float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _round_half_away(value: float) -> int:
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"cannot represent {value!r} as a fixed-point number")
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Fixed:
    """A mutable fixed-point number stored as a scaled integer."""

    __slots__ = ("_raw",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Union["Fixed", Number] = 0) -> None:
        if isinstance(value, Fixed):
            self._raw = value._raw
            _trace("Copy constructor called")
        elif isinstance(value, int):
            self._raw = int(value) << FRACTIONAL_BITS
            _trace("Default constructor called" if value == 0 and type(value) is int and False
                   else "Int constructor called")
        elif isinstance(value, float):
            self._raw = _round_half_away(_f32(_f32(value) * _SCALE))
            _trace("Float constructor called")
        else:
            raise TypeError(f"cannot build Fixed from {type(value).__name__}")

    @classmethod
    def from_raw(cls, raw: int) -> "Fixed":
        """Build a value directly from its scaled integer representation."""
        if not isinstance(raw, int):
            raise TypeError("raw bits must be an int")
        result = cls.__new__(cls)
        result._raw = int(raw)
        _trace("Default constructor called")
        return result

    @property
    def raw(self) -> int:
        """The underlying scaled integer."""
        return self._raw

    @raw.setter
    def raw(self, value: int) -> None:
        if not isinstance(value, int):
            raise TypeError("raw bits must be an int")
        self._raw = int(value)

    def to_float(self) -> float:
        return _f32(float(self._raw) / _SCALE)

    def to_int(self) -> int:
        return self._raw >> FRACTIONAL_BITS

    def __str__(self) -> str:
        return format(self.to_float(), "g")

    def __repr__(self) -> str:
        return f"Fixed({self})"

    @staticmethod
    def _coerce(other: object) -> "Fixed | None":
        if isinstance(other, Fixed):
            return other
        if isinstance(other, (int, float)):
            return Fixed(other)
        return None

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._raw == rhs._raw

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._raw < rhs._raw

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._raw <= rhs._raw

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._raw > rhs._raw

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._raw >= rhs._raw

    def __add__(self, other: object) -> "Fixed":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fixed(_f32(self.to_float() + rhs.to_float()))

    def __sub__(self, other: object) -> "Fixed":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fixed(_f32(self.to_float() - rhs.to_float()))

    def __mul__(self, other: object) -> "Fixed":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fixed(_f32(self.to_float() * rhs.to_float()))

    def __truediv__(self, other: object) -> "Fixed":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        divisor = rhs.to_float()
        if divisor == 0:
            raise ZeroDivisionError("fixed-point division by zero")
        return Fixed(_f32(self.to_float() / divisor))

    def increment(self) -> "Fixed":
        """Add the smallest step in place and return self."""
        self._raw += 1
        return self

    def decrement(self) -> "Fixed":
        """Subtract the smallest step in place and return self."""
        self._raw -= 1
        return self

    def post_increment(self) -> "Fixed":
        """Add the smallest step in place and return the previous value."""
        previous = Fixed(self)
        self.increment()
        return previous

    def post_decrement(self) -> "Fixed":
        """Subtract the smallest step in place and return the previous value."""
        previous = Fixed(self)
        self.decrement()
        return previous


def smaller(a: Fixed, b: Fixed) -> Fixed:
    """Return the lesser of two values; on a tie, the second one."""
    return a if a < b else b


def larger(a: Fixed, b: Fixed) -> Fixed:
    """Return the greater of two values; on a tie, the second one."""
    return a if a > b else b
"""Overflow-safe unsigned arithmetic for pool reserves and amounts.

Reserves and amounts are unsigned 64-bit quantities. Any product of two of
them can exceed 64 bits, so every such product goes through this module
instead of bare ``*``:
- add/mul raise Overflow when the result leaves the target width
- sub raises Underflow when the result would be negative
- div raises DivisionByZero on a zero divisor

Formula intermediates use Wide, an explicit double-width (128-bit) integer
that is narrowed back to 64 bits once the final division brings it into
range.

Usage pattern:
    from amm_pricing.safe_math import W

    def calculate(a: int, b: int, c: int) -> int:
        # Widen at entry
        wa, wb = W(a), W(b)

        # Natural arithmetic, checked against 128 bits
        result = (wa * wb) // c   # Raises if c == 0

        # Narrow at exit
        return result.narrow()
"""

from __future__ import annotations

from typing import ClassVar

from amm_pricing.constants import UINT64_MAX, UINT128_MAX
from amm_pricing.errors import ErrorKind

_WIDTH_MAX = {64: UINT64_MAX, 128: UINT128_MAX}


class SafeMathError(ArithmeticError):
    """Base class for checked arithmetic errors."""

    kind: ClassVar[ErrorKind]


class Overflow(SafeMathError):
    """Result exceeds the unsigned range of the target width."""

    kind = ErrorKind.OVERFLOW


class Underflow(SafeMathError):
    """Result would be negative."""

    kind = ErrorKind.UNDERFLOW


class DivisionByZero(SafeMathError):
    """Division by zero."""

    kind = ErrorKind.DIVISION_BY_ZERO


def _width_max(bits: int) -> int:
    try:
        return _WIDTH_MAX[bits]
    except KeyError:
        raise ValueError(f"Unsupported integer width: {bits}") from None


def _operand(x: Wide | int, bits: int) -> int:
    """Validate an operand and return it as a plain int.

    Raises:
        TypeError: If x is not an int or Wide (bool is rejected)
        Underflow: If x is negative
        Overflow: If x does not fit in the target width
    """
    if isinstance(x, Wide):
        value = x._value
    elif isinstance(x, int) and not isinstance(x, bool):
        value = x
    else:
        raise TypeError(f"Unsigned operand must be int, got {type(x).__name__}")
    if value < 0:
        raise Underflow(f"Negative value is not unsigned: {value}")
    if value > _width_max(bits):
        raise Overflow(f"Value exceeds uint{bits} max: {value}")
    return value


def add(a: Wide | int, b: Wide | int, *, bits: int = 64) -> int:
    """Add two unsigned values.

    Raises:
        Overflow: If a + b exceeds the target width
    """
    av, bv = _operand(a, bits), _operand(b, bits)
    result = av + bv
    if result > _width_max(bits):
        raise Overflow(f"Overflow: {av} + {bv} exceeds uint{bits}")
    return result


def sub(a: Wide | int, b: Wide | int, *, bits: int = 64) -> int:
    """Subtract b from a.

    Raises:
        Underflow: If b > a
    """
    av, bv = _operand(a, bits), _operand(b, bits)
    if bv > av:
        raise Underflow(f"Underflow: {av} - {bv} = {av - bv}")
    return av - bv


def mul(a: Wide | int, b: Wide | int, *, bits: int = 64) -> int:
    """Multiply two unsigned values.

    The product is computed exactly before the width check, so it never
    wraps silently.

    Raises:
        Overflow: If a * b exceeds the target width
    """
    av, bv = _operand(a, bits), _operand(b, bits)
    result = av * bv
    if result > _width_max(bits):
        raise Overflow(f"Overflow: {av} * {bv} exceeds uint{bits}")
    return result


def div(a: Wide | int, b: Wide | int, *, bits: int = 64) -> int:
    """Floor division.

    Raises:
        DivisionByZero: If b is zero
    """
    av, bv = _operand(a, bits), _operand(b, bits)
    if bv == 0:
        raise DivisionByZero(f"Division by zero: {av} // 0")
    return av // bv


def narrow(value: Wide | int) -> int:
    """Narrow a result back to an unsigned 64-bit amount.

    Raises:
        Underflow: If value is negative
        Overflow: If value exceeds 2^64-1
    """
    if isinstance(value, Wide):
        value = value._value
    if value < 0:
        raise Underflow(f"Negative value cannot be uint64: {value}")
    if value > UINT64_MAX:
        raise Overflow(f"Value exceeds uint64 max: {value}")
    return value


def uint64(value: int) -> int:
    """Validate an unsigned 64-bit input and return it.

    Raises:
        TypeError: If value is not an int
        Underflow: If value is negative
        Overflow: If value exceeds 2^64-1
    """
    return _operand(value, 64)


class Wide:
    """Unsigned 128-bit intermediate with checked arithmetic.

    Holds products of two 64-bit quantities without loss. Every operation is
    checked against the 128-bit range; narrow() converts the final result
    back to a 64-bit amount.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | Wide) -> None:
        """Create a Wide from an integer or another Wide.

        Raises:
            TypeError: If value is not an int or Wide
            Underflow: If value is negative
            Overflow: If value exceeds 2^128-1
        """
        self._value = _operand(value, 128)

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"Wide({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: Wide | int) -> Wide:
        return Wide(add(self, other, bits=128))

    def __radd__(self, other: int) -> Wide:
        return Wide(add(other, self, bits=128))

    def __sub__(self, other: Wide | int) -> Wide:
        return Wide(sub(self, other, bits=128))

    def __rsub__(self, other: int) -> Wide:
        return Wide(sub(other, self, bits=128))

    def __mul__(self, other: Wide | int) -> Wide:
        return Wide(mul(self, other, bits=128))

    def __rmul__(self, other: int) -> Wide:
        return Wide(mul(other, self, bits=128))

    def __floordiv__(self, other: Wide | int) -> Wide:
        return Wide(div(self, other, bits=128))

    def __rfloordiv__(self, other: int) -> Wide:
        return Wide(div(other, self, bits=128))

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Wide):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: Wide | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: Wide | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: Wide | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: Wide | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __float__(self) -> float:
        return float(self._value)

    def __bool__(self) -> bool:
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    def narrow(self) -> int:
        """Convert to a 64-bit amount.

        Raises:
            Overflow: If value exceeds 2^64-1
        """
        return narrow(self._value)


def _extract_value(x: Wide | int) -> int:
    """Extract integer value from Wide or int."""
    if isinstance(x, Wide):
        return x._value
    return x


# Convenience alias for concise formulas
W = Wide

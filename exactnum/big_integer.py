#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""
Arbitrary-precision signed integers.

BigInteger stores a Sign and a tuple of limbs (see digits.py). Instances
are immutable: every operator returns a new value, so a BigInteger can be
shared between threads and used as a dictionary key.

Division truncates toward zero and the remainder takes the sign of the
dividend, as in C. Both ``/`` and ``//`` perform this truncating division,
which differs from Python's int floor division for negative operands.

Example:
    >>> a = BigInteger("123456789")
    >>> str(a * BigInteger("987654321"))
    '121932631112635269'
    >>> BigInteger(100) // 7, BigInteger(-7) % 2
    (BigInteger('14'), BigInteger('-1'))
"""

from typing import Tuple, Union

from .digits import (add_magnitudes, compare_magnitudes, format_magnitude, from_int, is_one, is_zero, parse_decimal,
                     subtract_magnitudes, to_int)
from .division import divide_magnitudes
from .exceptions import DomainError
from .multiplication import multiply_magnitudes
from .sign import Sign

IntegerLike = Union['BigInteger', int, str]


class BigInteger:
    """
    Signed integer of unbounded size.

    Supported constructors:
    - BigInteger() - zero
    - BigInteger("-1234") - decimal string, ``["-"] digit+``
    - BigInteger(1234) - Python int
    - BigInteger(other) - copy of another BigInteger
    """

    __slots__ = ('_sign', '_limbs')

    def __init__(self, value: IntegerLike = 0):
        if isinstance(value, BigInteger):
            sign, limbs = value._sign, value._limbs
        elif isinstance(value, str):
            sign, limbs = parse_decimal(value)
        elif isinstance(value, int):
            sign, limbs = from_int(int(value))
        else:
            raise TypeError(f"Cannot create BigInteger from {type(value).__name__}")
        self._sign = sign
        self._limbs = tuple(limbs)

    @classmethod
    def _make(cls, sign: Sign, limbs) -> 'BigInteger':
        """Build from a canonical magnitude, forcing zero to be positive."""
        result = cls.__new__(cls)
        result._sign = Sign.POSITIVE if is_zero(limbs) else sign
        result._limbs = tuple(limbs)
        return result

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def digits(self) -> Tuple[int, ...]:
        """Limbs, least-significant first."""
        return self._limbs

    def limb_count(self) -> int:
        return len(self._limbs)

    def is_zero(self) -> bool:
        return is_zero(self._limbs)

    def is_one(self) -> bool:
        return self._sign is Sign.POSITIVE and is_one(self._limbs)

    def is_negative(self) -> bool:
        return self._sign is Sign.NEGATIVE

    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        if self.is_zero():
            return 0
        return self._sign.value

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def negate(self) -> 'BigInteger':
        return BigInteger._make(self._sign.negate(), self._limbs)

    def abs(self) -> 'BigInteger':
        if self._sign is Sign.POSITIVE:
            return self
        return BigInteger._make(Sign.POSITIVE, self._limbs)

    def add(self, other: IntegerLike) -> 'BigInteger':
        """
        Sum of two values.

        Equal signs add the magnitudes. Different signs subtract the smaller
        magnitude from the larger one and keep the sign of the larger.
        """
        other = _as_big_integer(other)
        if self._sign is other._sign:
            return BigInteger._make(self._sign, add_magnitudes(self._limbs, other._limbs))
        order = compare_magnitudes(self._limbs, other._limbs)
        if order == 0:
            return BigInteger.ZERO
        if order > 0:
            return BigInteger._make(self._sign, subtract_magnitudes(self._limbs, other._limbs))
        return BigInteger._make(other._sign, subtract_magnitudes(other._limbs, self._limbs))

    def subtract(self, other: IntegerLike) -> 'BigInteger':
        return self.add(_as_big_integer(other).negate())

    def multiply(self, other: IntegerLike, **kwargs) -> 'BigInteger':
        """Product; keyword arguments are passed on as multiplication options."""
        other = _as_big_integer(other)
        limbs = multiply_magnitudes(self._limbs, other._limbs, **kwargs)
        return BigInteger._make(Sign.combine(self._sign, other._sign), limbs)

    def divide(self, other: IntegerLike) -> 'BigInteger':
        """
        Quotient truncated toward zero.

        Raises:
            DomainError: If other is zero
        """
        other = _as_big_integer(other)
        if other.is_zero():
            raise DomainError(f"Division by zero: {self} / 0")
        limbs = divide_magnitudes(self._limbs, other._limbs)
        return BigInteger._make(Sign.combine(self._sign, other._sign), limbs)

    def mod(self, other: IntegerLike) -> 'BigInteger':
        """Remainder a - (a / b) * b; its sign follows the dividend."""
        return self.divide_and_remainder(other)[1]

    def divide_and_remainder(self, other: IntegerLike) -> Tuple['BigInteger', 'BigInteger']:
        other = _as_big_integer(other)
        quotient = self.divide(other)
        return quotient, self.subtract(quotient.multiply(other))

    def pow(self, exponent: int) -> 'BigInteger':
        """Return this^exponent for a non-negative int exponent."""
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError("Exponent must be an integer")
        if exponent < 0:
            raise ValueError(f"Exponent must be non-negative, got {exponent}")
        result = BigInteger.ONE
        base = self
        while exponent:
            if exponent & 1:
                result = result.multiply(base)
            exponent >>= 1
            if exponent:
                base = base.multiply(base)
        return result

    def increment(self) -> 'BigInteger':
        return self.add(BigInteger.ONE)

    def decrement(self) -> 'BigInteger':
        return self.subtract(BigInteger.ONE)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare_to(self, other: IntegerLike) -> int:
        """Compare by sign first, then by magnitude: -1 if less, 0 if equal, 1 if greater"""
        other = _as_big_integer(other)
        if self._sign is not other._sign:
            return -1 if self._sign < other._sign else 1
        order = compare_magnitudes(self._limbs, other._limbs)
        return -order if self._sign is Sign.NEGATIVE else order

    def __eq__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._sign is other._sign and self._limbs == other._limbs

    def __lt__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return hash(int(self))

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """Canonical decimal: optional '-', no leading zeros beyond a lone '0'."""
        text = format_magnitude(self._limbs)
        return '-' + text if self._sign is Sign.NEGATIVE else text

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"

    def __int__(self) -> int:
        magnitude = to_int(self._limbs)
        return -magnitude if self._sign is Sign.NEGATIVE else magnitude

    def __bool__(self) -> bool:
        return not self.is_zero()

    # Python operator overloading
    def __add__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.subtract(other)

    def __rsub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.subtract(self)

    def __mul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.multiply(other)

    def __rmul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.multiply(self)

    def __floordiv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.divide(other)

    def __rfloordiv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.divide(self)

    __truediv__ = __floordiv__
    __rtruediv__ = __rfloordiv__

    def __mod__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.mod(other)

    def __rmod__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.mod(self)

    def __divmod__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.divide_and_remainder(other)

    def __rdivmod__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.divide_and_remainder(self)

    def __pow__(self, exponent):
        return self.pow(exponent)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()


def _coerce(value):
    """BigInteger for BigInteger or int operands, None for anything else."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int):
        return BigInteger(value)
    return None


def _as_big_integer(value: IntegerLike) -> BigInteger:
    if isinstance(value, BigInteger):
        return value
    return BigInteger(value)


BigInteger.ZERO = BigInteger(0)
BigInteger.ONE = BigInteger(1)

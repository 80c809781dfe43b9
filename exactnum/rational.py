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
Exact rational numbers on top of BigInteger.

A Rational keeps a non-negative numerator, a positive denominator and a
separate Sign. Every constructor and operation ends in normalization: the
numerator's own sign is folded into the value's sign, zero becomes +0/1,
and numerator and denominator are divided by their gcd. Instances are
immutable and hashable; a Rational equal to an int hashes like that int.

Example:
    >>> Rational(1, 3) + Rational(1, 6)
    Rational(1, 2)
    >>> Rational(1, 3).as_decimal(3)
    '0.333'
"""

from fractions import Fraction
from typing import Optional, Tuple, Union

from .big_integer import BigInteger, IntegerLike
from .digits import parse_magnitude
from .exceptions import DomainError, ParseError
from .gcd import gcd
from .names import FLOAT_CONVERSION_DIGITS
from .sign import Sign

RationalLike = Union['Rational', BigInteger, int, str]


def _normalize(sign: Sign, numerator: BigInteger,
               denominator: BigInteger) -> Tuple[Sign, BigInteger, BigInteger]:
    """Canonical (sign, numerator, denominator) with gcd(numerator, denominator) == 1."""
    sign = Sign.combine(sign, numerator.sign)
    sign = Sign.combine(sign, denominator.sign)
    numerator = numerator.abs()
    denominator = denominator.abs()
    if numerator.is_zero():
        sign = Sign.POSITIVE
    g = gcd(numerator, denominator)
    if not g.is_one():
        numerator = numerator.divide(g)
        denominator = denominator.divide(g)
    return sign, numerator, denominator


def _parse_rational(text: str) -> Tuple[BigInteger, BigInteger]:
    """
    Numerator and denominator described by text.

    Accepted forms: "-12", "-3/4" and decimal notation "-1.25". The
    denominator of a fraction carries no sign.
    """
    try:
        if '/' in text:
            numerator_text, _, denominator_text = text.partition('/')
            numerator = BigInteger(numerator_text)
            denominator = BigInteger._make(Sign.POSITIVE, parse_magnitude(denominator_text))
            if denominator.is_zero():
                raise DomainError(f"Zero denominator in {text!r}")
            return numerator, denominator
        if '.' in text:
            integer_text, _, fraction_text = text.partition('.')
            parse_magnitude(fraction_text)
            numerator = BigInteger(integer_text + fraction_text)
            return numerator, BigInteger('1' + '0' * len(fraction_text))
        return BigInteger(text), BigInteger.ONE
    except ParseError as e:
        if e.text == text:
            raise
        raise ParseError(text, e.reason) from e


class Rational:
    """
    Canonical fraction of two BigIntegers.

    Supported constructors:
    - Rational() - zero
    - Rational(7), Rational(BigInteger(7)) - whole number
    - Rational(other) - copy of another Rational
    - Rational(numerator, denominator) - ints or BigIntegers; zero denominator raises DomainError
    - Rational("-3/4"), Rational("12"), Rational("0.125") - parsed strings
    """

    __slots__ = ('_sign', '_numerator', '_denominator')

    def __init__(self, value: RationalLike = 0, denominator: Optional[IntegerLike] = None):
        if denominator is None:
            if isinstance(value, Rational):
                self._sign = value._sign
                self._numerator = value._numerator
                self._denominator = value._denominator
                return
            if isinstance(value, str):
                numerator, denominator = _parse_rational(value)
            elif isinstance(value, (BigInteger, int)):
                numerator, denominator = BigInteger(value), BigInteger.ONE
            else:
                raise TypeError(f"Cannot create Rational from {type(value).__name__}")
        else:
            if isinstance(value, Rational) or not isinstance(value, (BigInteger, int, str)):
                raise TypeError(f"Numerator must be an integer, got {type(value).__name__}")
            numerator, denominator = BigInteger(value), BigInteger(denominator)
            if denominator.is_zero():
                raise DomainError("Division by zero")
        self._sign, self._numerator, self._denominator = _normalize(Sign.POSITIVE, numerator, denominator)

    @classmethod
    def _make(cls, sign: Sign, numerator: BigInteger, denominator: BigInteger) -> 'Rational':
        result = cls.__new__(cls)
        result._sign, result._numerator, result._denominator = _normalize(sign, numerator, denominator)
        return result

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def numerator(self) -> BigInteger:
        """Returns the numerator, always non-negative"""
        return self._numerator

    @property
    def denominator(self) -> BigInteger:
        """Returns the denominator, always positive"""
        return self._denominator

    def _signed_numerator(self) -> BigInteger:
        return self._numerator.negate() if self._sign is Sign.NEGATIVE else self._numerator

    def is_zero(self) -> bool:
        return self._numerator.is_zero()

    def is_integer(self) -> bool:
        return self._denominator.is_one()

    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        if self.is_zero():
            return 0
        return self._sign.value

    # Arithmetic
    def negate(self) -> 'Rational':
        return Rational._make(self._sign.negate(), self._numerator, self._denominator)

    def abs(self) -> 'Rational':
        if self._sign is Sign.POSITIVE:
            return self
        return Rational._make(Sign.POSITIVE, self._numerator, self._denominator)

    def reciprocal(self) -> 'Rational':
        """Return multiplicative inverse (1/this)"""
        if self.is_zero():
            raise DomainError("Division by zero")
        return Rational._make(self._sign, self._denominator, self._numerator)

    def add(self, other: RationalLike) -> 'Rational':
        other = _as_rational(other)
        numerator = (self._signed_numerator().multiply(other._denominator)
                     .add(other._signed_numerator().multiply(self._denominator)))
        return Rational._make(Sign.POSITIVE, numerator, self._denominator.multiply(other._denominator))

    def subtract(self, other: RationalLike) -> 'Rational':
        other = _as_rational(other)
        numerator = (self._signed_numerator().multiply(other._denominator)
                     .subtract(other._signed_numerator().multiply(self._denominator)))
        return Rational._make(Sign.POSITIVE, numerator, self._denominator.multiply(other._denominator))

    def multiply(self, other: RationalLike) -> 'Rational':
        other = _as_rational(other)
        return Rational._make(Sign.combine(self._sign, other._sign), self._numerator.multiply(other._numerator),
                              self._denominator.multiply(other._denominator))

    def divide(self, other: RationalLike) -> 'Rational':
        """
        Quotient, computed as the product with the reciprocal of other.

        Raises:
            DomainError: If other is zero
        """
        return self.multiply(_as_rational(other).reciprocal())

    # Comparison
    def compare_to(self, other: RationalLike) -> int:
        """Compare to another value: -1 if less, 0 if equal, 1 if greater"""
        other = _as_rational(other)
        if self._sign is not other._sign:
            return -1 if self._sign < other._sign else 1
        order = self._numerator.multiply(other._denominator).compare_to(other._numerator.multiply(self._denominator))
        return -order if self._sign is Sign.NEGATIVE else order

    def __eq__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return (self._sign is other._sign and self._numerator == other._numerator and
                self._denominator == other._denominator)

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
        return hash(self.to_fraction())

    # Conversion
    def as_decimal(self, precision: int = 0) -> str:
        """
        Decimal expansion truncated to a number of fractional digits.

        The numerator is scaled by 10**precision, divided by the denominator
        and the decimal point is spliced into the resulting digits.

        Args:
            precision: Digits after the decimal point; 0 gives no point at all

        Returns:
            Decimal string, '-' prefixed for negative values

        Examples:
            >>> Rational(1, 3).as_decimal(3)
            '0.333'
            >>> Rational(-7, 2).as_decimal(2)
            '-3.50'
            >>> Rational(1, 200).as_decimal(2)
            '0.00'
        """
        if precision < 0:
            raise ValueError(f"precision must be non-negative, got {precision}")
        scale = BigInteger('1' + '0' * precision)
        digits = self._numerator.multiply(scale).divide(self._denominator).to_string()
        prefix = '-' if self._sign is Sign.NEGATIVE else ''
        if precision == 0:
            return prefix + digits
        if len(digits) <= precision:
            return prefix + '0.' + '0' * (precision - len(digits)) + digits
        return prefix + digits[:-precision] + '.' + digits[-precision:]

    def to_fraction(self) -> Fraction:
        return Fraction(int(self._signed_numerator()), int(self._denominator))

    def to_string(self) -> str:
        text = self._signed_numerator().to_string()
        if not self._denominator.is_one():
            text += '/' + self._denominator.to_string()
        return text

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Rational({self._signed_numerator()}, {self._denominator})"

    def __float__(self) -> float:
        """Approximate value, parsed from a 30 digit decimal expansion"""
        return float(self.as_decimal(FLOAT_CONVERSION_DIGITS))

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

    def __truediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.divide(other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.divide(self)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()


def _coerce(value) -> Optional[Rational]:
    """Rational for Rational, BigInteger or int operands, None for anything else."""
    if isinstance(value, Rational):
        return value
    if isinstance(value, (BigInteger, int)):
        return Rational(value)
    return None


def _as_rational(value: RationalLike) -> Rational:
    if isinstance(value, Rational):
        return value
    return Rational(value)


Rational.ZERO = Rational(0)
Rational.ONE = Rational(1)

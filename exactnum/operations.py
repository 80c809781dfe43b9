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
Factory and stream operations for BigInteger and Rational.

NumberOperations subclasses are singletons that create numbers of their
class and move them through text streams, one whitespace-delimited token
per value.

Example:
    >>> import io
    >>> stream = io.StringIO("  -12  3/4")
    >>> read_big_integer(stream), read_rational(stream)
    (BigInteger('-12'), Rational(3, 4))
"""

from typing import TextIO, Union

from .big_integer import BigInteger
from .rational import Rational

Number = Union[BigInteger, Rational]


def _read_token(stream: TextIO) -> str:
    """Skip leading whitespace and read characters up to the next whitespace."""
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)
    if not char:
        raise EOFError("Unexpected end of stream")
    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)
    return ''.join(chars)


class NumberOperations:
    """Factory methods and stream I/O for one number class."""

    _instance = None
    _number_class = None

    def __new__(cls):
        """Singleton pattern implementation"""
        if cls._instance is None:
            cls._instance = super(NumberOperations, cls).__new__(cls)
        return cls._instance

    @classmethod
    def instance(cls) -> 'NumberOperations':
        """Returns the singleton instance."""
        return cls()

    def number_class(self) -> type:
        return self._number_class

    def value_of_string(self, s: str) -> Number:
        return self._number_class(s)

    def value_of_int(self, value: int) -> Number:
        return self._number_class(value)

    def zero(self) -> Number:
        return self._number_class.ZERO

    def one(self) -> Number:
        return self._number_class.ONE

    def read_from(self, stream: TextIO) -> Number:
        """Parse the next token of a text stream.

        Raises:
            EOFError: If the stream holds no further token
            ParseError: If the token is not a number
        """
        return self.value_of_string(_read_token(stream))

    def write_to(self, number: Number, stream: TextIO) -> None:
        stream.write(number.to_string())


class BigIntegerOperations(NumberOperations):
    _instance = None
    _number_class = BigInteger


class RationalOperations(NumberOperations):
    _instance = None
    _number_class = Rational


def read_big_integer(stream: TextIO) -> BigInteger:
    return BigIntegerOperations.instance().read_from(stream)


def read_rational(stream: TextIO) -> Rational:
    return RationalOperations.instance().read_from(stream)


def write_number(number: Number, stream: TextIO) -> None:
    """Write the canonical string of a BigInteger or Rational."""
    if isinstance(number, Rational):
        RationalOperations.instance().write_to(number, stream)
    elif isinstance(number, BigInteger):
        BigIntegerOperations.instance().write_to(number, stream)
    else:
        raise TypeError(f"Cannot write {type(number).__name__}")

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
"""Greatest common divisor of BigIntegers"""

from .big_integer import BigInteger, IntegerLike


def gcd(a: IntegerLike, b: IntegerLike) -> BigInteger:
    """
    Iterative Euclidean algorithm.

    Replaces (a, b) with (b, a mod b) until b is zero. The modulo raises
    DomainError on a zero divisor, so the loop test must come first.

    Args:
        a, b: BigInteger or int operands of any sign

    Returns:
        Non-negative BigInteger; gcd(0, 0) is 0

    Examples:
        >>> gcd(BigInteger(12), BigInteger(-18))
        BigInteger('6')
    """
    a = abs(BigInteger(a))
    b = abs(BigInteger(b))
    while b:
        a, b = b, a % b
    return a

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
Schoolbook long division of limb magnitudes at decimal-digit granularity.

The divisor is rendered as decimal text and padded with zeros so that its
most-significant digit lines up with the dividend's. For each decimal
position the shifted divisor is subtracted from the running remainder as
often as it fits (never more than nine times), the count becomes the next
quotient digit and the divisor is shifted down by one decimal digit.
"""

from .digits import (Limbs, compare_magnitudes, format_magnitude, is_zero, parse_magnitude, shift_down_decimal,
                     subtract_magnitudes)
from .exceptions import DomainError
from .names import DECIMAL_DIGITS, RADIX_DIGITS


def divide_magnitudes(a: Limbs, b: Limbs) -> Limbs:
    """
    Truncated quotient |a| // |b|.

    Args:
        a: Dividend magnitude
        b: Divisor magnitude

    Returns:
        Canonical limb list of the quotient

    Raises:
        DomainError: If b is zero
    """
    if is_zero(b):
        raise DomainError("Division by zero")
    if len(b) > len(a):
        return [0]
    degree = (len(a) - len(b) + 1) * RADIX_DIGITS
    shifted = parse_magnitude(format_magnitude(b) + '0' * degree)
    remainder = list(a)
    quotient_digits = []
    for _ in range(degree + 1):
        count = 0
        while count < 9 and compare_magnitudes(remainder, shifted) >= 0:
            remainder = subtract_magnitudes(remainder, shifted)
            count += 1
        quotient_digits.append(DECIMAL_DIGITS[count])
        shifted = shift_down_decimal(shifted)
    return parse_magnitude(''.join(quotient_digits))

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
Digit store for arbitrary-precision magnitudes.

A magnitude is a list of limbs, least-significant first, each limb in
[0, RADIX). The canonical form has no most-significant zero limbs; zero is
the single limb [0]. All functions here work on magnitudes only, signs are
handled by the callers.
"""

from typing import Sequence, Tuple

from .exceptions import ParseError
from .names import DECIMAL_DIGITS, RADIX, RADIX_DIGITS
from .sign import Sign

Limbs = Sequence[int]

_DIGIT_SET = frozenset(DECIMAL_DIGITS)


# =============================================================================
# Canonical form
# =============================================================================


def strip(limbs: Limbs) -> Limbs:
    """Remove most-significant zero limbs in place, keeping one limb for zero."""
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    if not limbs:
        limbs.append(0)
    return limbs


def is_zero(limbs: Limbs) -> bool:
    return len(limbs) == 1 and limbs[0] == 0


def is_one(limbs: Limbs) -> bool:
    return len(limbs) == 1 and limbs[0] == 1


# =============================================================================
# Construction
# =============================================================================


def parse_magnitude(text: str, radix_digits: int = RADIX_DIGITS) -> Limbs:
    """
    Convert a run of ASCII digits into limbs.

    The text is cut into chunks of radix_digits characters starting at the
    least-significant end; each chunk becomes one limb.

    Args:
        text: One or more characters from '0123456789'
        radix_digits: Decimal digits per limb

    Returns:
        Canonical limb list

    Raises:
        ParseError: If text is empty or holds anything but ASCII digits
    """
    if not text:
        raise ParseError(text, "empty digit sequence")
    if not _DIGIT_SET.issuperset(text):
        raise ParseError(text, "only ASCII digits are allowed")
    limbs = []
    for end in range(len(text), 0, -radix_digits):
        limbs.append(int(text[max(0, end - radix_digits):end]))
    return strip(limbs)


def parse_decimal(text: str) -> Tuple[Sign, Limbs]:
    """Parse ``["-"] digit+`` into a sign and a magnitude."""
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    sign = Sign.POSITIVE
    body = text
    if text.startswith('-'):
        sign = Sign.NEGATIVE
        body = text[1:]
        if not body:
            raise ParseError(text, "sign without digits")
    limbs = parse_magnitude(body)
    if is_zero(limbs):
        sign = Sign.POSITIVE
    return sign, limbs


def from_int(value: int, radix: int = RADIX) -> Tuple[Sign, Limbs]:
    """Split a Python int into a sign and a magnitude by repeated division."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    sign = Sign.of(value)
    value = abs(value)
    limbs = []
    while True:
        value, limb = divmod(value, radix)
        limbs.append(limb)
        if value == 0:
            break
    return sign, limbs


def to_int(limbs: Limbs, radix: int = RADIX) -> int:
    result = 0
    for limb in reversed(limbs):
        result = result * radix + limb
    return result


# =============================================================================
# Formatting
# =============================================================================


def format_magnitude(limbs: Limbs, radix_digits: int = RADIX_DIGITS) -> str:
    """Canonical decimal text of a magnitude, without leading zeros."""
    head = str(limbs[-1])
    tail = ''.join(str(limb).zfill(radix_digits) for limb in reversed(limbs[:-1]))
    return head + tail


# =============================================================================
# Comparison
# =============================================================================


def compare_magnitudes(a: Limbs, b: Limbs) -> int:
    """
    Compare two canonical magnitudes.

    The shorter limb list is smaller; lists of equal length are compared
    from the most-significant limb down.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


# =============================================================================
# Limb arithmetic
# =============================================================================


def add_magnitudes(a: Limbs, b: Limbs, radix: int = RADIX) -> Limbs:
    """Limb-wise sum with carry."""
    if len(a) < len(b):
        a, b = b, a
    result = []
    carry = 0
    for i in range(len(a)):
        total = a[i] + (b[i] if i < len(b) else 0) + carry
        if total >= radix:
            result.append(total - radix)
            carry = 1
        else:
            result.append(total)
            carry = 0
    result.append(carry)
    return strip(result)


def subtract_magnitudes(big: Limbs, small: Limbs, radix: int = RADIX) -> Limbs:
    """Difference big - small with borrow; big must not be smaller than small."""
    result = []
    borrow = 0
    for i in range(len(big)):
        current = big[i] - (small[i] if i < len(small) else 0) - borrow
        if current < 0:
            current += radix
            borrow = 1
        else:
            borrow = 0
        result.append(current)
    if borrow:
        raise ValueError("subtrahend is larger than minuend")
    return strip(result)


def shift_down_decimal(limbs: Limbs, radix: int = RADIX) -> Limbs:
    """Divide a magnitude by ten, dropping the last decimal digit."""
    result = [0] * len(limbs)
    remainder = 0
    for i in range(len(limbs) - 1, -1, -1):
        current = limbs[i] + remainder * radix
        result[i], remainder = divmod(current, 10)
    return strip(result)

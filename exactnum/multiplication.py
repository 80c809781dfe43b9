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
Multiplication of limb magnitudes.

The fast path treats both limb lists as polynomial coefficients and
convolves them with an iterative radix-2 transform on complex float64
arrays, then rounds and carries the result back into limbs.

Accuracy:
    The rounded coefficients are exact only while the accumulated floating
    point error stays below one half. fft_error_bound() estimates the error
    magnitude as sqrt(len_a * len_b) * (radix - 1)**2 * log2(n) for a
    transform of length n, and FFT_ERROR_BUDGET (2**47) is the largest value
    accepted as exact. At the default radix 10**4 this allows operands of
    roughly 78 000 limbs (about 310 000 decimal digits) each; at radix 10**6
    only 23 limbs. fft_multiply(..., check_precision=False) skips the check,
    and products beyond the bound may then be silently wrong.

    The schoolbook variant is exact for any size. multiply_magnitudes()
    selects between both according to the multiplication options.

The process-wide options are not synchronized. Change them before sharing
work between threads.
"""

import logging
import math
from typing import Dict

import numpy as np

from .digits import Limbs, is_zero, strip
from .exceptions import PrecisionError
from .names import (AUTO, DEFAULT_SCHOOLBOOK_CUTOFF, FFT, FFT_ERROR_BUDGET, MULTIPLICATION, MULTIPLICATION_METHODS,
                    RADIX, SCHOOLBOOK, SCHOOLBOOK_CUTOFF)

LOG = logging.getLogger(__name__)

_options = {MULTIPLICATION: AUTO, SCHOOLBOOK_CUTOFF: DEFAULT_SCHOOLBOOK_CUTOFF}


# =============================================================================
# Options
# =============================================================================


def _resolve_options(overrides: Dict) -> Dict:
    options = dict(_options)
    for key, value in overrides.items():
        if key not in options:
            raise ValueError(f"Unknown multiplication option: {key}")
        options[key] = value
    if options[MULTIPLICATION] not in MULTIPLICATION_METHODS:
        raise ValueError(f"Unknown multiplication method '{options[MULTIPLICATION]}'. "
                         f"Choose one of {', '.join(MULTIPLICATION_METHODS)}.")
    cutoff = options[SCHOOLBOOK_CUTOFF]
    if isinstance(cutoff, bool) or not isinstance(cutoff, int) or cutoff < 0:
        raise ValueError(f"{SCHOOLBOOK_CUTOFF} must be a non-negative int, got {cutoff!r}")
    return options


def set_multiplication_options(**kwargs) -> None:
    """Change the process-wide defaults used by multiply_magnitudes.

    Example:
        >>> set_multiplication_options(multiplication='schoolbook')
    """
    _options.update(_resolve_options(kwargs))


def get_multiplication_options() -> Dict:
    return dict(_options)


# =============================================================================
# Transform
# =============================================================================


def _bit_reverse_permutation(n: int) -> np.ndarray:
    bits = n.bit_length() - 1
    index = np.arange(n, dtype=np.int64)
    reversed_index = np.zeros(n, dtype=np.int64)
    for _ in range(bits):
        reversed_index = (reversed_index << 1) | (index & 1)
        index >>= 1
    return reversed_index


def transform(values: np.ndarray, invert: bool = False) -> np.ndarray:
    """
    Iterative radix-2 transform of a power-of-two length complex array.

    The input is permuted into bit-reversed order, then butterflies of
    growing length 2, 4, ..., n are applied stage by stage. The inverse uses
    the opposite rotation angle and divides every coefficient by n.

    Args:
        values: 1-d array, its length a power of two
        invert: Compute the inverse transform

    Returns:
        New complex128 array with the transformed coefficients
    """
    n = values.shape[0]
    if n == 0 or n & (n - 1):
        raise ValueError(f"Transform length must be a power of two, got {n}")
    result = np.asarray(values, dtype=np.complex128)[_bit_reverse_permutation(n)]
    length = 2
    while length <= n:
        half = length // 2
        angle = 2.0 * math.pi / length * (-1.0 if invert else 1.0)
        twiddles = np.exp(1j * angle * np.arange(half))
        blocks = result.reshape(-1, length)
        upper = blocks[:, :half].copy()
        lower = blocks[:, half:] * twiddles
        blocks[:, :half] = upper + lower
        blocks[:, half:] = upper - lower
        length <<= 1
    if invert:
        result /= n
    return result


def transform_length(len_a: int, len_b: int) -> int:
    """Power of two holding the full product, at least twice the longer operand."""
    n = 1
    while n < max(len_a, len_b):
        n <<= 1
    return n << 1


def fft_error_bound(len_a: int, len_b: int, radix: int = RADIX) -> float:
    n = transform_length(len_a, len_b)
    return math.sqrt(len_a * len_b) * float(radix - 1)**2 * math.log2(n)


def max_safe_limbs(radix: int = RADIX) -> int:
    """Largest limb count two equally long operands may have for an exact product."""
    if fft_error_bound(1, 1, radix) > FFT_ERROR_BUDGET:
        return 0
    low, high = 1, 2
    while fft_error_bound(high, high, radix) <= FFT_ERROR_BUDGET:
        low, high = high, high * 2
    while high - low > 1:
        middle = (low + high) // 2
        if fft_error_bound(middle, middle, radix) <= FFT_ERROR_BUDGET:
            low = middle
        else:
            high = middle
    return low


# =============================================================================
# Products
# =============================================================================


def _carry(coefficients, radix: int) -> Limbs:
    limbs = []
    carry = 0
    for coefficient in coefficients:
        carry, limb = divmod(coefficient + carry, radix)
        limbs.append(limb)
    while carry:
        carry, limb = divmod(carry, radix)
        limbs.append(limb)
    return strip(limbs)


def fft_multiply(a: Limbs, b: Limbs, radix: int = RADIX, check_precision: bool = True) -> Limbs:
    """
    Product of two magnitudes by transform convolution.

    Args:
        a, b: Canonical limb lists in the given radix
        radix: Limb radix of a, b and the result
        check_precision: Refuse operands beyond the exact range

    Returns:
        Canonical limb list of a * b

    Raises:
        PrecisionError: If check_precision is set and the operands are too
            large for exact rounding
    """
    if check_precision and fft_error_bound(len(a), len(b), radix) > FFT_ERROR_BUDGET:
        raise PrecisionError(f"Operands of {len(a)} and {len(b)} limbs exceed the exact range of "
                             f"float64 transform multiplication at radix {radix} "
                             f"(max {max_safe_limbs(radix)} limbs each)")
    n = transform_length(len(a), len(b))
    fa = np.zeros(n, dtype=np.complex128)
    fb = np.zeros(n, dtype=np.complex128)
    fa[:len(a)] = a
    fb[:len(b)] = b
    product = transform(transform(fa) * transform(fb), invert=True)
    rounded = [int(c) for c in np.rint(product.real).tolist()]
    return _carry(rounded, radix)


def schoolbook_multiply(a: Limbs, b: Limbs, radix: int = RADIX) -> Limbs:
    """Quadratic product of two magnitudes, exact for any size."""
    result = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        if x == 0:
            continue
        carry = 0
        for j, y in enumerate(b):
            carry, result[i + j] = divmod(result[i + j] + x * y + carry, radix)
        k = i + len(b)
        while carry:
            carry, result[k] = divmod(result[k] + carry, radix)
            k += 1
    return strip(result)


def multiply_magnitudes(a: Limbs, b: Limbs, **kwargs) -> Limbs:
    """
    Product of two magnitudes using the configured method.

    Keyword options override the process-wide defaults:
        multiplication: 'auto' (default), 'fft' or 'schoolbook'
        schoolbook_cutoff: in 'auto' mode, operands with at most this many
            limbs on the shorter side use the schoolbook method

    In 'auto' mode operands beyond the exact transform range fall back to the
    schoolbook method. An explicit 'fft' raises PrecisionError instead.
    """
    options = _resolve_options(kwargs)
    if is_zero(a) or is_zero(b):
        return [0]
    method = options[MULTIPLICATION]
    if method == SCHOOLBOOK:
        return schoolbook_multiply(a, b)
    if method == FFT:
        return fft_multiply(a, b)
    if min(len(a), len(b)) <= options[SCHOOLBOOK_CUTOFF]:
        return schoolbook_multiply(a, b)
    if fft_error_bound(len(a), len(b)) > FFT_ERROR_BUDGET:
        LOG.debug(f"Operands of {len(a)} and {len(b)} limbs exceed the transform range, using schoolbook.")
        return schoolbook_multiply(a, b)
    return fft_multiply(a, b, check_precision=False)

"""Multiplication engine tests: transform, exact range, method selection and options."""
import logging
import pytest
import numpy as np
from exactnum import multiplication
from exactnum.digits import from_int, parse_magnitude, to_int
from exactnum.exceptions import DomainError, PrecisionError
from exactnum.multiplication import (fft_error_bound, fft_multiply, max_safe_limbs, multiply_magnitudes,
                                     schoolbook_multiply, set_multiplication_options, transform, transform_length)
from exactnum.names import *

# =============================================================================
# Transform
# =============================================================================


@pytest.mark.parametrize("n", [1, 2, 4, 8, 64, 1024])
def test_transform_matches_numpy(n, rng):
    """The forward transform uses the positive rotation angle, i.e. n * ifft."""
    values = np.array([complex(rng.randrange(100), rng.randrange(100)) for _ in range(n)])
    assert np.allclose(transform(values), np.fft.ifft(values) * n)
    assert np.allclose(transform(values, invert=True), np.fft.fft(values) / n)


def test_transform_roundtrip(rng):
    """Inverse after forward gives back the input."""
    values = np.array([float(rng.randrange(RADIX)) for _ in range(256)])
    assert np.allclose(transform(transform(values), invert=True).real, values)


def test_transform_does_not_modify_input():
    values = np.array([1.0, 2.0, 3.0, 4.0], dtype=np.complex128)
    transform(values)
    assert np.array_equal(values, np.array([1.0, 2.0, 3.0, 4.0]))


@pytest.mark.parametrize("n", [0, 3, 6, 100])
def test_transform_rejects_other_lengths(n):
    with pytest.raises(ValueError, match="power of two"):
        transform(np.zeros(n, dtype=np.complex128))


def test_transform_length():
    """Smallest power of two covering the longer operand, doubled."""
    assert transform_length(1, 1) == 2
    assert transform_length(3, 5) == 16
    assert transform_length(8, 2) == 16
    assert transform_length(9, 9) == 32


# =============================================================================
# Products
# =============================================================================


def test_fft_multiply_concrete():
    """123456789 * 987654321 through the transform."""
    product = fft_multiply(parse_magnitude("123456789"), parse_magnitude("987654321"))
    assert to_int(product) == 121932631112635269


def test_products_match_int(random_ints):
    """Both engines agree with Python ints for random magnitudes."""
    values = [abs(v) for v in random_ints]
    for a, b in zip(values, values[1:] + values[:1]):
        la, lb = from_int(a)[1], from_int(b)[1]
        assert to_int(fft_multiply(la, lb)) == a * b
        assert to_int(schoolbook_multiply(la, lb)) == a * b


def test_products_with_zero_limbs():
    """Zero limbs inside operands and zero operands."""
    a = parse_magnitude("100000000000000000001")
    b = parse_magnitude("10000000000000000")
    assert to_int(fft_multiply(a, b)) == 100000000000000000001 * 10000000000000000
    assert to_int(schoolbook_multiply(a, b)) == 100000000000000000001 * 10000000000000000
    assert fft_multiply([0], b) == [0]
    assert schoolbook_multiply(a, [0]) == [0]


def test_multiply_magnitudes_methods(mult_method, random_ints):
    """Every method yields the exact product."""
    values = [abs(v) for v in random_ints]
    for a, b in zip(values, reversed(values)):
        product = multiply_magnitudes(from_int(a)[1], from_int(b)[1], **{MULTIPLICATION: mult_method})
        assert to_int(product) == a * b


# =============================================================================
# Exact range of the float64 transform
# =============================================================================


def test_max_safe_limbs_radix_million():
    """At radix 10**6 equal operands may have at most 23 limbs."""
    assert max_safe_limbs(10**6) == 23
    assert fft_error_bound(23, 23, 10**6) <= FFT_ERROR_BUDGET
    assert fft_error_bound(24, 24, 10**6) > FFT_ERROR_BUDGET


def test_max_safe_limbs_default_radix():
    """The default radix allows operands of roughly 300 000 decimal digits."""
    limbs = max_safe_limbs()
    assert 70000 < limbs < 80000
    assert max_safe_limbs(10**9) == 0


def test_product_exact_at_boundary():
    """All-nines operands of the largest safe size multiply exactly."""
    radix = 10**6
    size = max_safe_limbs(radix)
    a = [radix - 1] * size
    value = radix**size - 1
    assert to_int(fft_multiply(a, a, radix=radix), radix) == value * value
    b = [radix - 1] * (size // 2)
    assert to_int(fft_multiply(a, b, radix=radix), radix) == value * (radix**(size // 2) - 1)


def test_product_beyond_boundary_is_refused():
    """One limb more than the safe size raises PrecisionError when checked."""
    radix = 10**6
    a = [radix - 1] * (max_safe_limbs(radix) + 1)
    with pytest.raises(PrecisionError) as e:
        fft_multiply(a, a, radix=radix)
    assert isinstance(e.value, DomainError)
    # unchecked products beyond the bound are not guaranteed to be exact
    assert len(fft_multiply(a, a, radix=radix, check_precision=False)) >= 1


def test_explicit_fft_beyond_boundary_raises():
    """Requesting the transform for oversized operands fails before any work."""
    a = [RADIX - 1] * (max_safe_limbs() + 1)
    with pytest.raises(PrecisionError):
        multiply_magnitudes(a, a, **{MULTIPLICATION: FFT})


def test_auto_falls_back_to_schoolbook(monkeypatch, caplog):
    """In auto mode, operands beyond the exact range use the schoolbook method."""
    monkeypatch.setattr(multiplication, "FFT_ERROR_BUDGET", 1.0)
    a = parse_magnitude("9" * 400)
    with caplog.at_level(logging.DEBUG, logger="exactnum.multiplication"):
        product = multiply_magnitudes(a, a, **{MULTIPLICATION: AUTO, SCHOOLBOOK_CUTOFF: 0})
    assert to_int(product) == (10**400 - 1)**2
    assert "using schoolbook" in caplog.text


# =============================================================================
# Options
# =============================================================================


def test_set_multiplication_options(restore_options):
    set_multiplication_options(**{MULTIPLICATION: SCHOOLBOOK, SCHOOLBOOK_CUTOFF: 4})
    options = multiplication.get_multiplication_options()
    assert options[MULTIPLICATION] == SCHOOLBOOK
    assert options[SCHOOLBOOK_CUTOFF] == 4


@pytest.mark.parametrize("options", [{MULTIPLICATION: "karatsuba"}, {"radix": 10}, {SCHOOLBOOK_CUTOFF: -1},
                                     {SCHOOLBOOK_CUTOFF: 2.5}])
def test_invalid_options(options, restore_options):
    """Unknown keys, methods and cutoffs raise ValueError and leave defaults untouched."""
    before = multiplication.get_multiplication_options()
    with pytest.raises(ValueError):
        set_multiplication_options(**options)
    with pytest.raises(ValueError):
        multiply_magnitudes([1], [1], **options)
    assert multiplication.get_multiplication_options() == before

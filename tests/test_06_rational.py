"""Rational tests: normalization, arithmetic, comparison and decimal expansion"""
from fractions import Fraction
import pytest
from exactnum import BigInteger, DomainError, ParseError, Rational, Sign, gcd


def assert_canonical(value: Rational):
    """Reduced fraction, positive denominator, no negative zero."""
    assert value.denominator > 0
    assert value.numerator >= 0
    assert gcd(value.numerator, value.denominator).is_one()
    if value.is_zero():
        assert value.sign is Sign.POSITIVE
        assert value.denominator.is_one()


@pytest.fixture
def random_fractions(rng):
    values = [Fraction(0), Fraction(1), Fraction(-1, 2)]
    for _ in range(25):
        numerator = rng.randrange(-10**15, 10**15)
        denominator = rng.randrange(1, 10**12)
        values.append(Fraction(numerator, denominator))
    return values


# =============================================================================
# Construction and normalization
# =============================================================================


def test_sum_concrete():
    assert Rational(1, 3) + Rational(1, 6) == Rational(1, 2)
    assert repr(Rational(1, 3) + Rational(1, 6)) == "Rational(1, 2)"


def test_ordering_concrete():
    assert Rational(-7, 2) < Rational(1, 2)
    assert not Rational(1, 2) < Rational(-7, 2)


@pytest.mark.parametrize("numerator, denominator, expected", [
    (6, 8, "3/4"),
    (6, -8, "-3/4"),
    (-6, -8, "3/4"),
    (0, -5, "0"),
    (10, 5, "2"),
    (-10, 1, "-10"),
])
def test_normalization(numerator, denominator, expected):
    value = Rational(numerator, denominator)
    assert str(value) == expected
    assert_canonical(value)


def test_constructors():
    assert Rational() == Rational(0, 1)
    assert Rational(7) == Rational(BigInteger(7))
    assert Rational(Rational(3, 9)) == Rational(1, 3)
    assert Rational(BigInteger(-4), BigInteger(6)) == Rational(-2, 3)
    assert Rational("-6", "8") == Rational(-3, 4)
    assert Rational(12).is_integer()
    assert not Rational(1, 2).is_integer()


@pytest.mark.parametrize("text, expected", [
    ("-3/4", Fraction(-3, 4)),
    ("12/36", Fraction(1, 3)),
    ("-0/7", Fraction(0)),
    ("42", Fraction(42)),
    ("0.125", Fraction(1, 8)),
    ("-1.25", Fraction(-5, 4)),
    ("00.50", Fraction(1, 2)),
])
def test_parse_strings(text, expected):
    value = Rational(text)
    assert value.to_fraction() == expected
    assert_canonical(value)


@pytest.mark.parametrize("text", ["", "1/", "/2", "1/-2", "a/b", "1.", "1.2.3", "1/2/3", "1 /2"])
def test_malformed_strings_raise(text):
    with pytest.raises(ParseError):
        Rational(text)


def test_zero_denominator_raises():
    with pytest.raises(DomainError):
        Rational(1, 0)
    with pytest.raises(DomainError):
        Rational("1/0")
    with pytest.raises(ZeroDivisionError):
        Rational(3, BigInteger(0))


def test_invalid_types_raise():
    with pytest.raises(TypeError):
        Rational(1.5)
    with pytest.raises(TypeError):
        Rational(Rational(1, 2), 3)


# =============================================================================
# Arithmetic
# =============================================================================


def test_arithmetic_matches_fraction(random_fractions):
    """Results agree with fractions.Fraction and stay canonical."""
    for a, b in zip(random_fractions, reversed(random_fractions)):
        x = Rational(a.numerator, a.denominator)
        y = Rational(b.numerator, b.denominator)
        for result, expected in [(x + y, a + b), (x - y, a - b), (x * y, a * b)]:
            assert result.to_fraction() == expected
            assert_canonical(result)
        if b:
            assert (x / y).to_fraction() == a / b
            assert_canonical(x / y)


def test_unary_operations():
    value = Rational(-3, 4)
    assert -value == Rational(3, 4)
    assert abs(value) == Rational(3, 4)
    assert value.negate().negate() == value
    assert value.reciprocal() == Rational(-4, 3)
    assert [Rational(v).signum() for v in (-2, 0, 2)] == [-1, 0, 1]
    assert (-Rational(0)).sign is Sign.POSITIVE


def test_mixed_operands():
    half = Rational(1, 2)
    assert half + 1 == Rational(3, 2)
    assert 1 - half == half
    assert 3 * half == Rational(3, 2)
    assert 1 / half == 2
    assert half * BigInteger(4) == 2
    with pytest.raises(TypeError):
        half + 0.5


def test_cancellation_yields_positive_zero():
    zero = Rational(-1, 3) + Rational(1, 3)
    assert zero == Rational(0)
    assert zero.sign is Sign.POSITIVE
    assert str(zero) == "0"
    assert not zero


def test_division_by_zero_raises():
    with pytest.raises(DomainError):
        Rational(1, 2) / Rational(0)
    with pytest.raises(DomainError):
        Rational(0).reciprocal()


# =============================================================================
# Comparison, hashing and conversion
# =============================================================================


def test_ordering_matches_fraction(random_fractions):
    for a, b in zip(random_fractions, random_fractions[1:]):
        x = Rational(a.numerator, a.denominator)
        y = Rational(b.numerator, b.denominator)
        assert (x < y) == (a < b)
        assert (x >= y) == (a >= b)
        assert (x == y) == (a == b)
        assert x.compare_to(y) == (a > b) - (a < b)


def test_hash_is_consistent():
    assert hash(Rational(3)) == hash(3)
    assert hash(Rational(2, 4)) == hash(Fraction(1, 2))
    assert len({Rational(1, 2), Rational("2/4"), Rational("0.5")}) == 1
    assert Rational(5) == 5


@pytest.mark.parametrize("value, precision, expected", [
    (Rational(1, 3), 3, "0.333"),
    (Rational(2, 3), 3, "0.666"),
    (Rational(-7, 2), 2, "-3.50"),
    (Rational(1, 200), 2, "0.00"),
    (Rational(1, 200), 3, "0.005"),
    (Rational(22, 7), 0, "3"),
    (Rational(-22, 7), 5, "-3.14285"),
    (Rational(12), 2, "12.00"),
    (Rational(0), 1, "0.0"),
])
def test_as_decimal(value, precision, expected):
    assert value.as_decimal(precision) == expected


def test_as_decimal_negative_precision_raises():
    with pytest.raises(ValueError):
        Rational(1, 3).as_decimal(-1)


def test_float_conversion():
    assert float(Rational(1, 3)) == pytest.approx(1 / 3)
    assert float(Rational(-5, 4)) == -1.25


def test_matches_sympy(random_fractions):
    """Cross-check reduced forms against sympy's Rational."""
    sympy = pytest.importorskip("sympy")
    for a, b in zip(random_fractions, reversed(random_fractions)):
        expected = sympy.Rational(a.numerator, a.denominator) * sympy.Rational(b.numerator, b.denominator)
        result = Rational(a.numerator, a.denominator) * Rational(b.numerator, b.denominator)
        assert int(result.numerator) == abs(int(expected.p))
        assert int(result.denominator) == int(expected.q)
        assert str(result) == str(expected)

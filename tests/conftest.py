import random
import pytest
from exactnum.names import *
from exactnum import multiplication

# Seed for all randomized operand lists
SEED = 20221

methods = [AUTO, FFT, SCHOOLBOOK]


@pytest.fixture(params=methods, scope="session")
def mult_method(request: pytest.FixtureRequest) -> str:
    """Provide session-level fixture for parametrized multiplication methods."""
    return request.param


@pytest.fixture
def rng() -> random.Random:
    """Provide a freshly seeded random generator per test."""
    return random.Random(SEED)


@pytest.fixture
def random_ints(rng):
    """Provide signed ints from one digit up to a few hundred digits, zero included."""
    values = [0, 1, -1, RADIX - 1, RADIX, -RADIX]
    for _ in range(40):
        digits = rng.choice([1, 3, 4, 5, 8, 9, 17, 40, 120, 300])
        value = rng.randrange(10**(digits - 1), 10**digits)
        values.append(value if rng.random() < 0.5 else -value)
    return values


@pytest.fixture
def restore_options():
    """Reset process-wide multiplication options after the test."""
    saved = multiplication.get_multiplication_options()
    yield
    multiplication._options.clear()
    multiplication._options.update(saved)

import math

import pytest

from dsakit.recursion import (
    count_to,
    count_up,
    factorial,
    fibonacci,
    gcd,
    is_prime,
    power_of_two,
    reach_home,
    spell_digits,
)


def test_count_up_range():
    assert count_up(3, 6) == [3, 4, 5, 6]


def test_count_up_single():
    assert count_up(4, 4) == [4]


def test_count_up_backwards_raises():
    with pytest.raises(ValueError):
        count_up(5, 2)


def test_count_to():
    assert count_to(4) == [1, 2, 3, 4]
    assert count_to(0) == []


def test_count_to_negative_raises():
    with pytest.raises(ValueError):
        count_to(-1)


def test_spell_digits():
    assert spell_digits(1203) == ["one", "two", "zero", "three"]


def test_spell_digits_zero_is_empty():
    assert spell_digits(0) == []


def test_spell_digits_length_matches_digit_count():
    n = 9876543210
    assert len(spell_digits(n)) == len(str(n))


def test_spell_digits_negative_raises():
    with pytest.raises(ValueError):
        spell_digits(-5)


@pytest.mark.parametrize("n", range(0, 15))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-3)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 25))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_power_of_two_base():
    assert power_of_two(0) == 1


@pytest.mark.parametrize("n", range(0, 20))
def test_power_of_two_doubles(n):
    assert power_of_two(n + 1) == 2 * power_of_two(n)


def test_power_of_two_negative_raises():
    with pytest.raises(ValueError):
        power_of_two(-2)


def test_reach_home_walks_every_step():
    steps = reach_home(1, 10)
    assert steps == list(range(1, 11))
    assert steps[0] == 1 and steps[-1] == 10


def test_reach_home_already_home():
    assert reach_home(7, 7) == [7]


def test_reach_home_backwards_raises():
    with pytest.raises(ValueError):
        reach_home(10, 1)


def test_gcd_with_zero():
    assert gcd(0, 12) == 12
    assert gcd(12, 0) == 12


@pytest.mark.parametrize("a,b", [(48, 18), (17, 5), (100, 75), (9, 9), (1, 40)])
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)
    assert gcd(a, b) == gcd(b, a)


def test_gcd_negative_raises():
    with pytest.raises(ValueError):
        gcd(-4, 6)


@pytest.mark.parametrize("p", [2, 3, 5, 7, 11, 13, 97])
def test_primes(p):
    assert is_prime(p) is True


@pytest.mark.parametrize("a,b", [(2, 2), (3, 5), (7, 7), (4, 9), (11, 13)])
def test_products_are_not_prime(a, b):
    assert is_prime(a * b) is False


@pytest.mark.parametrize("n", [-3, 0, 1])
def test_below_two_not_prime(n):
    assert is_prime(n) is False
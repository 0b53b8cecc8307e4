import random

import pytest
from sympy import isprime, nextprime

from mrprime import next_prime, random_prime

def test_next_prime_small():
    assert next_prime(-5) == 2
    assert next_prime(0) == 2
    assert next_prime(2) == 2
    assert next_prime(3) == 3
    assert next_prime(4) == 5
    assert next_prime(14) == 17
    assert next_prime(90) == 97
    assert next_prime(97) == 97

def test_next_prime_iters():
    assert next_prime(2, return_iters=True) == (2, 0)
    p, iters = next_prime(24, return_iters=True)
    assert p == 29 and iters == 3

def test_next_prime_matches_sympy():
    rng = random.Random(5)
    for start in (10**6, 10**12, 2**64, 10**30):
        assert next_prime(start, rounds=20, rng=rng) == nextprime(start - 1)

def test_random_prime_bits():
    rng = random.Random(99)
    for bits in (2, 3, 8, 32, 64, 128):
        p = random_prime(bits, rounds=20, rng=rng)
        assert p.bit_length() == bits
        assert isprime(p)

def test_random_prime_rejects_tiny_bits():
    with pytest.raises(ValueError):
        random_prime(1)

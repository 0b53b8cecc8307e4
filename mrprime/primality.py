# mrprime/primality.py
# Randomized Miller–Rabin probable-prime test
# - n-1 = d * 2^s decomposition
# - single strong round for a given base
# - k-round test with witness bases drawn from a pluggable random source

from __future__ import annotations
import logging, operator, os, random
from typing import Optional, Tuple

import gmpy2

log = logging.getLogger(__name__)

DEFAULT_ROUNDS = int(os.getenv("MR_ROUNDS", "5"))

# ---------- Utilities ----------

def _powmod(a: int, e: int, n: int) -> int:
    return int(gmpy2.powmod(a, e, n))

def uniform_random(lo: int, hi: int, rng=None) -> int:
    """Uniform integer in the inclusive range [lo, hi]."""
    if lo > hi:
        raise ValueError(f"empty range [{lo}, {hi}]")
    if rng is None:
        rng = random.SystemRandom()
    return rng.randint(lo, hi)

def decompose(n: int) -> Tuple[int, int]:
    """Return (d, s) with n-1 == d * 2**s and d odd."""
    if n < 2:
        raise ValueError("n must be >= 2")
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2; s += 1
    return d, s

def false_positive_bound(rounds: int) -> float:
    """Upper bound on P(composite reported as probable prime) after `rounds` rounds."""
    return 4.0 ** -rounds

# ---------- Miller–Rabin ----------

def is_strong_probable_prime(n: int, a: int, d: Optional[int] = None, s: Optional[int] = None) -> bool:
    """One strong Miller–Rabin round for base a (assuming n>3 odd)."""
    if d is None or s is None:
        d, s = decompose(n)
    x = _powmod(a, d, n)
    if x == 1 or x == n-1:
        return True
    for _ in range(s-1):
        x = _powmod(x, 2, n)
        if x == n-1:
            return True
    return False

def is_probable_prime(n: int, rounds: int = DEFAULT_ROUNDS, rng=None) -> bool:
    """
    Miller–Rabin with `rounds` random witness bases from `rng`
    (anything with randint(a, b); defaults to SystemRandom).
    Never rejects a prime; a composite slips through with probability <= 4^-rounds.
    """
    if isinstance(n, bool):
        raise TypeError("n must be an int, got bool")
    try:
        n = operator.index(n)
    except TypeError:
        raise TypeError(f"n must be an int, got {type(n).__name__}") from None
    if n <= 1: return False
    if n in (2, 3): return True
    if n % 2 == 0: return False

    if not isinstance(rounds, int) or isinstance(rounds, bool) or rounds < 1:
        raise ValueError("rounds must be an integer >= 1")
    if rng is None:
        rng = random.SystemRandom()

    d, s = decompose(n)
    for i in range(rounds):
        a = uniform_random(2, n-2, rng)
        if not is_strong_probable_prime(n, a, d, s):
            log.debug("witness %d proves %d composite (round %d/%d)", a, n, i+1, rounds)
            return False
    return True

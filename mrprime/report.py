from __future__ import annotations
import random

import sympy

from .primality import DEFAULT_ROUNDS, is_probable_prime

def cross_check(n: int) -> bool:
    """Library primality verdict, printed next to ours for comparison."""
    return bool(sympy.isprime(n))

def summarize(n: int, rounds: int = DEFAULT_ROUNDS, rng=None, builtin: bool = True) -> str:
    line = f"{n} -> MR={is_probable_prime(n, rounds, rng)} (k={rounds})"
    if builtin:
        line += f" | builtin={cross_check(n)}"
    return line

def estimate_pass_rate(n: int, rounds: int, trials: int, rng=None) -> float:
    """
    Fraction of `trials` independent tests of n that answer "probably prime".
    For a composite this estimates the false-positive rate at `rounds` rounds.
    """
    if trials < 1:
        raise ValueError("trials must be >= 1")
    if rng is None:
        rng = random.SystemRandom()
    hits = sum(1 for _ in range(trials) if is_probable_prime(n, rounds, rng))
    return hits / trials

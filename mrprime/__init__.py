from .primality import (
    DEFAULT_ROUNDS,
    decompose,
    false_positive_bound,
    is_probable_prime,
    is_strong_probable_prime,
    uniform_random,
)
from .primes import next_prime, random_prime
from .report import cross_check, estimate_pass_rate, summarize
__all__ = [
    "DEFAULT_ROUNDS", "decompose", "false_positive_bound", "is_probable_prime",
    "is_strong_probable_prime", "uniform_random", "next_prime", "random_prime",
    "cross_check", "estimate_pass_rate", "summarize",
]

import random
from typing import Tuple, Union

from .primality import DEFAULT_ROUNDS, is_probable_prime

# --- Odd stepper for next probable prime ---
def next_prime(start: int, rounds: int = DEFAULT_ROUNDS, rng=None,
               return_iters: bool = False) -> Union[int, Tuple[int, int]]:
    n = max(2, start)
    if n <= 2: return (2,0) if return_iters else 2
    if n == 3: return (3,0) if return_iters else 3
    if n % 2 == 0: n += 1
    if rng is None:
        rng = random.SystemRandom()
    iters = 0
    while True:
        iters += 1
        if is_probable_prime(n, rounds, rng):
            return (n,iters) if return_iters else n
        n += 2

# --- Random probable prime of exactly `bits` bits ---
def random_prime(bits: int, rounds: int = DEFAULT_ROUNDS, rng=None) -> int:
    if bits < 2: raise ValueError("bits must be >=2")
    if rng is None:
        rng = random.SystemRandom()
    if bits == 2:
        return rng.choice((2, 3))
    while True:
        n = rng.getrandbits(bits)
        n |= (1 << (bits-1)) | 1   # ensure top bit + odd
        if is_probable_prime(n, rounds, rng):
            return n

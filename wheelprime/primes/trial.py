# wheelprime/primes/trial.py
# Deterministic trial division over the unsigned 64-bit domain.
from math import isqrt

U64_MAX = 2**64 - 1


def ceil_sqrt(n: int) -> int:
    """Smallest integer r with r*r >= n."""
    r = isqrt(n)
    return r if r * r == n else r + 1


def is_prime(n: int) -> bool:
    """
    Return True iff n is prime, for 0 <= n <= U64_MAX.

    Divisors are scanned in pairs p, p+2 for p = 5, 11, 17, ... which covers
    every 6k-1 / 6k+1 number up to ceil(sqrt(n)). Multiples of 2 and 3 are
    rejected up front.
    """
    if not 0 <= n <= U64_MAX:
        raise ValueError(f"n must be in [0, 2**64 - 1], got {n}")
    if n < 4:
        return n > 1
    if n % 2 == 0 or n % 3 == 0:
        return False
    # integer bound: never below the float ceil(sqrt(n)), exact past 2**53
    max_p = ceil_sqrt(n)
    for p in range(5, max_p + 1, 6):
        if n % p == 0 or n % (p + 2) == 0:
            return False
    return True

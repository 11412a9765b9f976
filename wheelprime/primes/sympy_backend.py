# wheelprime/primes/sympy_backend.py
# Reference backend: independent of the trial-division code, used to cross-check it.
import logging
from typing import Iterator, List

from sympy import isprime, nextprime, primerange

from .backends import PrimeBackend
from .trial import U64_MAX

logger = logging.getLogger(__name__)


def _check_range(name: str, value: int):
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{name} must be in [0, 2**64 - 1], got {value}")


class SympyBackend(PrimeBackend):
    name = "sympy"

    def primes_up_to(self, N: int) -> List[int]:
        _check_range("N", N)
        logger.debug("[sympy] primerange(2, %d)", N + 1)
        return [int(p) for p in primerange(2, N + 1)]

    def is_prime(self, n: int) -> bool:
        _check_range("n", n)
        logger.debug("[sympy] is_prime(%d)", n)
        return bool(isprime(int(n)))

    def iter_primes(self) -> Iterator[int]:
        logger.debug("[sympy] iter_primes from 2")
        p = 2
        while True:
            yield p
            p = int(nextprime(p))

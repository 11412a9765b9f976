# wheelprime/primes/trial_backend.py
import logging
from itertools import takewhile
from typing import Iterator, List

from .backends import PrimeBackend
from .sequence import PrimeSequence
from .trial import U64_MAX, is_prime

logger = logging.getLogger(__name__)


class TrialDivisionBackend(PrimeBackend):
    name = "trial"

    def primes_up_to(self, N: int) -> List[int]:
        if not 0 <= N <= U64_MAX:
            raise ValueError(f"N must be in [0, 2**64 - 1], got {N}")
        logger.debug("[trial] primes up to %d", N)
        return list(takewhile(lambda p: p <= N, PrimeSequence()))

    def is_prime(self, n: int) -> bool:
        logger.debug("[trial] is_prime(%d)", n)
        return is_prime(n)

    def iter_primes(self) -> Iterator[int]:
        return PrimeSequence()

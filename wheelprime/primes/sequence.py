# wheelprime/primes/sequence.py
from collections.abc import Iterator
from itertools import islice
from typing import List

from .trial import U64_MAX, is_prime


class PrimeSequence(Iterator):
    """
    Infinite ascending stream of primes: 2, 3, 5, 7, 11, ...

    The stream runs one prime ahead of what it hands out. Each call returns
    the held `_current` prime only after the following prime has been found
    and stored in `_next`. Candidates come from the 6k-1 / 6k+1 wheel
    starting at 5, 7.

    One instance is one consumer; it is not safe to share across threads
    without a lock. Build a new instance to start over from 2.
    """

    # last candidate the wheel may hand to is_prime
    limit = U64_MAX

    __slots__ = ("_current", "_next", "_trial_a", "_trial_b")

    def __init__(self):
        self._current = 2
        self._next = 3
        self._trial_a = 5
        self._trial_b = 7

    def __next__(self) -> int:
        if self._current is None:
            raise StopIteration
        prime = self._current
        self._current = self._next
        if self._next is not None:
            self._advance()
        return prime

    def _advance(self):
        while True:
            candidate = self._trial_a
            if candidate > self.limit:
                # nothing left in range: emit what is held, then stop
                self._next = None
                return
            self._next = candidate
            self._trial_a = self._trial_b
            self._trial_b = candidate + 6
            if is_prime(candidate):
                return

    def __repr__(self):
        return f"{type(self).__name__}(current={self._current}, next={self._next})"


def first_primes(k: int) -> List[int]:
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    return list(islice(PrimeSequence(), k))


def primes_below(bound: int):
    """Yield the primes p < bound in ascending order."""
    for p in PrimeSequence():
        if p >= bound:
            return
        yield p

# wheelprime/primes/backends.py
from abc import ABC, abstractmethod
from typing import Iterator, List

class PrimeBackend(ABC):
    name = "abstract"

    @abstractmethod
    def primes_up_to(self, N: int) -> List[int]:
        ...

    @abstractmethod
    def is_prime(self, n: int) -> bool:
        ...

    @abstractmethod
    def iter_primes(self) -> Iterator[int]:
        ...


def get_backend(name: str) -> PrimeBackend:
    name = (name or "trial").lower()
    if name in ("trial", "default"):
        from .trial_backend import TrialDivisionBackend
        return TrialDivisionBackend()
    if name == "sympy":
        from .sympy_backend import SympyBackend
        return SympyBackend()
    raise ValueError(f"Unknown backend: {name}")

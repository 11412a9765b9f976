# wheelprime/analysis/density.py
# Expected prime counts and gap statistics for produced prime lists.
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from mpmath import li, mp, mpf
from sympy import mobius


@dataclass(frozen=True)
class GapSummary:
    count: int
    mean_gap: float
    max_gap: int
    twin_pairs: int
    entropy: float  # nats, over the gap histogram


def riemann_R(x, K=50):
    """Riemann's R(x) = sum mu(n)/n * li(x^(1/n)), an estimate of pi(x)."""
    if x < 2:
        return 0.0
    with mp.workdps(20):
        s = mpf(0)
        for n in range(1, K + 1):
            mu = mobius(n)
            if mu == 0:
                continue
            s += mpf(int(mu)) / n * li(mpf(x) ** (mpf(1) / n))
        return float(s)


def gap_summary(primes: Sequence[int]) -> GapSummary:
    # ascending input, so unsigned differences cannot wrap
    arr = np.asarray(primes, dtype=np.uint64)
    gaps = np.diff(arr)
    if len(gaps) == 0:
        return GapSummary(count=len(arr), mean_gap=float("nan"), max_gap=0, twin_pairs=0, entropy=0.0)
    _, counts = np.unique(gaps, return_counts=True)
    p = counts / counts.sum()
    H = -np.sum(p * np.log(p))
    return GapSummary(
        count=len(arr),
        mean_gap=float(gaps.mean()),
        max_gap=int(gaps.max()),
        twin_pairs=int(np.count_nonzero(gaps == 2)),
        entropy=float(H),
    )


def relative_error(found: int, expected: float) -> float:
    if expected == 0:
        return math.inf if found else 0.0
    return abs(found - expected) / expected

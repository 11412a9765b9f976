# wheelprime/primes/cli.py
# Usage: python -m wheelprime.primes.cli --N 100000 [--backend trial|sympy] [--stats] [--verify]
#        python -m wheelprime.primes.cli --take 20
#        python -m wheelprime.primes.cli --test 2147483647 91

import argparse
import logging
import sys
import time
from itertools import islice

from wheelprime.analysis.density import gap_summary, relative_error, riemann_R
from wheelprime.primes.backends import get_backend


def _verify(primes, upper, reference) -> bool:
    expected = reference.primes_up_to(upper)
    if primes != expected:
        missing = sorted(set(expected) - set(primes))[:10]
        extra = sorted(set(primes) - set(expected))[:10]
        print(f"Verify: MISMATCH (missing {missing}, extra {extra})")
        return False
    print(f"Verify: ok ({len(primes)} primes match {reference.name})")
    return True


def _report(args, primes, backend):
    if args.show > 0:
        print(f"First primes: {primes[: args.show]}")
    if args.stats:
        s = gap_summary(primes)
        print(f"Gaps: mean={s.mean_gap:.3f} max={s.max_gap} twins={s.twin_pairs} entropy={s.entropy:.3f}")
    if args.verify:
        upper = primes[-1] if primes else 0
        other = "trial" if backend.name == "sympy" else "sympy"
        return _verify(primes, upper, get_backend(other))
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(prog="wheelprime", description="Trial-division prime tools")
    parser.add_argument("--N", type=int, default=None, help="Upper bound for prime listing (inclusive)")
    parser.add_argument("--take", type=int, default=None, help="Print the first K primes of the sequence")
    parser.add_argument("--test", type=int, nargs="+", default=None, metavar="n", help="Test values for primality")
    parser.add_argument(
        "--backend",
        type=str,
        default="trial",
        choices=["trial", "sympy"],
        help="Prime backend to use",
    )
    parser.add_argument(
        "--show",
        type=int,
        default=10,
        help="Show first K primes in output (0 to disable)",
    )
    parser.add_argument("--stats", action="store_true", help="Print prime gap statistics")
    parser.add_argument("--verify", action="store_true", help="Cross-check results against the other backend")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.N is None and args.take is None and args.test is None:
        parser.error("one of --N, --take or --test is required")

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(name)s] %(message)s",
        )

    backend = get_backend(args.backend)
    print(f"Backend: {backend.name}")
    ok = True

    try:
        if args.test is not None:
            for n in args.test:
                verdict = "prime" if backend.is_prime(n) else "composite"
                print(f"{n}: {verdict}")

        if args.take is not None:
            if args.take < 0:
                raise ValueError(f"--take must be non-negative, got {args.take}")
            primes = list(islice(backend.iter_primes(), args.take))
            print(f"Took: {len(primes)}")
            ok = _report(args, primes, backend) and ok

        if args.N is not None:
            t0 = time.time()
            primes = backend.primes_up_to(args.N)
            dt = time.time() - t0
            expected = riemann_R(args.N)
            print(f"N: {args.N}")
            print(f"Primes found: {len(primes)}")
            print(f"Expected (R(N)): {expected:.1f} (rel. error {relative_error(len(primes), expected):.4f})")
            print(f"Time: {dt:.3f}s")
            ok = _report(args, primes, backend) and ok
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())

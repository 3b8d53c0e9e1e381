#!/usr/bin/env python3
"""
Verify the sieves against each other and against trial division.

Compares:
1. Prime lists from the plain, wheel and single-pass sieves
2. Primes against trial division (small N)
3. LPF values from the dense table against the wheel-indexed table
4. Extending a prime list step by step against a direct sieve

Run at small N first before timing large N.
"""

import sys
import time
import numpy as np
from typing import List

from lpfsieve.factorization import linear_primes_up_to, lpf_table
from lpfsieve.intmath import isqrt
from lpfsieve.primes import primes_up_to
from lpfsieve.wheel_sieve import wheel_lpf_lookup, wheel_lpf_sieve


def trial_division_primes(N: int) -> List[int]:
    """Primes <= N by trial division. Reference only, O(N sqrt N)."""
    result = []
    for n in range(2, N + 1):
        if all(n % d for d in range(2, isqrt(n) + 1)):
            result.append(n)
    return result


def verify_against_trial_division(N: int, verbose: bool = True) -> bool:
    """Verify every variant matches trial division up to N."""
    if verbose:
        print(f"\n=== Verifying against trial division for N={N:,} ===")

    expected = trial_division_primes(N)
    results = {
        'plain': primes_up_to(N),
        'wheel': primes_up_to(N, wheel=True),
        'linear': linear_primes_up_to(N),
    }

    ok = True
    for name, got in results.items():
        if got != expected:
            ok = False
            missing = sorted(set(expected) - set(got))[:10]
            extra = sorted(set(got) - set(expected))[:10]
            print(f"  MISMATCH {name}: missing={missing}, extra={extra}")

    if verbose:
        if ok:
            print(f"  ✓ All variants give the {len(expected):,} primes <= {N:,}")
        else:
            print(f"  ✗ Variants disagree with trial division")
    return ok


def verify_variants(N: int, verbose: bool = True) -> bool:
    """Verify the plain and wheel sieves agree up to N, with timings."""
    if verbose:
        print(f"\n=== Verifying plain vs wheel for N={N:,} ===")

    t0 = time.time()
    plain = primes_up_to(N)
    t_plain = time.time() - t0

    t0 = time.time()
    wheel = primes_up_to(N, wheel=True)
    t_wheel = time.time() - t0

    ok = plain == wheel
    if verbose:
        print(f"  Plain sieve: {t_plain:.2f}s, {len(plain):,} primes")
        print(f"  Wheel sieve: {t_wheel:.2f}s, {len(wheel):,} primes")
        if ok:
            print(f"  ✓ Prime lists match!")
        else:
            print(f"  ✗ Prime lists differ")
    return ok


def verify_lpf_values(N: int, verbose: bool = True) -> bool:
    """Verify LPF values match between the dense and wheel tables."""
    if verbose:
        print(f"\n=== Verifying LPF values for N={N:,} ===")

    lpf_dense = lpf_table(N)
    wheel, lpf_wheel = wheel_lpf_sieve(N, primes_up_to(isqrt(N)))

    if verbose:
        print(f"  Dense table: size={lpf_dense.nbytes/1e6:.1f}MB")
        print(f"  Wheel table: size={lpf_wheel.nbytes/1e6:.1f}MB, "
              f"circumference={wheel.circumference}, folded={wheel.folded_primes}")

    errors = 0
    for n in range(2, N + 1):
        from_dense = int(lpf_dense[n]) or n
        from_wheel = wheel_lpf_lookup(n, wheel, lpf_wheel)
        if from_dense != from_wheel:
            errors += 1
            if errors <= 10:
                print(f"  MISMATCH at n={n}: dense={from_dense}, wheel={from_wheel}")

    if verbose:
        if errors == 0:
            print(f"  ✓ All {N - 1:,} LPF values match!")
        else:
            print(f"  ✗ {errors:,} mismatches found")
    return errors == 0


def verify_extension(N: int, steps: int = 4, verbose: bool = True) -> bool:
    """Verify growing one prime list in steps gives the direct result."""
    if verbose:
        print(f"\n=== Verifying step-wise extension to N={N:,} ===")

    bounds = np.linspace(0, N, steps + 1, dtype=np.int64)[1:]
    ok = True
    for wheel in (False, True):
        primes = []
        for bound in bounds:
            primes_up_to(int(bound), primes, wheel=wheel)
        if primes != primes_up_to(N, wheel=wheel):
            ok = False
            print(f"  MISMATCH (wheel={wheel}) after bounds {bounds.tolist()}")

    if verbose:
        if ok:
            print(f"  ✓ Extension through {bounds.tolist()} matches")
        else:
            print(f"  ✗ Extension differs from direct sieve")
    return ok


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Verify LPF sieve correctness')
    parser.add_argument('--N', type=float, default=1e6, help='Upper bound (default: 1e6)')
    parser.add_argument('--trial', type=int, default=5000,
                        help='Bound for the trial division check (default: 5000)')
    args = parser.parse_args()

    N = int(args.N)

    print(f"LPF Sieve Verification")
    print(f"N = {N:,}")
    print("=" * 50)

    trial_ok = verify_against_trial_division(args.trial)
    variants_ok = verify_variants(N)
    lpf_ok = verify_lpf_values(min(N, 10**6))
    extension_ok = verify_extension(N)

    print("\n" + "=" * 50)
    if trial_ok and variants_ok and lpf_ok and extension_ok:
        print("✓ All verifications passed!")
    else:
        print("✗ Some verifications failed!")
        sys.exit(1)

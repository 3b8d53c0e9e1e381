#!/usr/bin/env python3
"""
Compute the primes up to a bound and print a summary.

Usage:
    python run_sieve.py
    python run_sieve.py --limit 10000000 --variant plain
    python run_sieve.py --config config/custom.yaml
"""

import argparse
import time

import yaml

from lpfsieve.errors import SieveError
from lpfsieve.primes import VARIANTS, sieve


def load_config(path: str) -> dict:
    """Load a YAML config, treating an empty file as no settings."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def main():
    parser = argparse.ArgumentParser(description='Pritchard linear LPF prime sieve')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--limit', type=int, default=None,
                        help='Upper bound (inclusive), overrides the config')
    parser.add_argument('--variant', choices=VARIANTS, default=None,
                        help='Sieve variant, overrides the config')
    parser.add_argument('--show', type=int, default=None,
                        help='Number of largest primes to print')
    args = parser.parse_args()

    config = load_config(args.config)
    limit = args.limit if args.limit is not None else config.get('limit', 100)
    variant = args.variant or config.get('variant', 'wheel')
    show = args.show if args.show is not None else config.get('show', 10)

    print("=" * 60)
    print("Pritchard LPF Sieve")
    print("=" * 60)
    print(f"  limit   = {limit:,}")
    print(f"  variant = {variant}")
    print()

    start = time.time()
    try:
        primes = sieve(limit, variant)
    except SieveError as e:
        parser.error(str(e))
    elapsed = time.time() - start

    print(f"  Found {len(primes):,} primes in {elapsed:.2f}s")
    if primes:
        print(f"  Largest prime: {primes[-1]:,}")
    if show > 0 and primes:
        print(f"  Last {min(show, len(primes))}: {primes[-show:]}")


if __name__ == '__main__':
    main()

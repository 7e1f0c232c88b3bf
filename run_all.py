#!/usr/bin/env python3
"""
Full reproducibility script.

Running this file verifies the sieve and regenerates every table and figure.

Usage:
    python run_all.py
    python run_all.py --config config/custom.yaml
"""

import argparse
import sys
import yaml
from pathlib import Path
import time

from src.bit_sieve import Sieve
from src.metrics import prime_gaps
from src.experiments.verify_bit_sieve import (
    verify_flags,
    verify_extended_range,
    verify_factorizations,
)
from src.experiments.exp_prime_tables import run_prime_tables
from src.plotting import plot_prime_counts, plot_gap_histogram


def main():
    parser = argparse.ArgumentParser(description='Verify the sieve and build all prime tables')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    args = parser.parse_args()

    # Load config
    with open(args.config) as f:
        config = yaml.safe_load(f)

    print("=" * 60)
    print("Bit-Packed Sieve of Eratosthenes - Full Run")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  limits = {config['limits']}")
    print(f"  sum_counts = {config['sum_counts']}")
    print(f"  constellation_sizes = {config['constellation_sizes']}")
    print(f"  verify_N = {config['verify_N']:,}")
    print(f"  seed = {config['seed']}")
    print()

    output_dir = Path(config.get('output_dir', 'data/results'))
    output_dir.mkdir(parents=True, exist_ok=True)

    total_start = time.time()

    # 1. Verification against the reference sieve
    print("-" * 60)
    print("1. Verification")
    print("-" * 60)
    start = time.time()
    N = config['verify_N']
    sample = config.get('verify_sample', 2000)
    ok = (
        verify_flags(N)
        and verify_extended_range(N, sample, config['seed'])
        and verify_factorizations(N, sample, config['seed'])
    )
    print(f"   Completed in {time.time() - start:.1f}s")
    print()
    if not ok:
        print("✗ Verification failed, not generating tables")
        sys.exit(1)

    # 2. Tables
    print("-" * 60)
    print("2. Prime Tables")
    print("-" * 60)
    start = time.time()
    tables = run_prime_tables(
        config['limits'],
        config['sum_counts'],
        config['constellation_sizes'],
        output_dir
    )
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 3. Figures
    print("-" * 60)
    print("3. Generating Figures")
    print("-" * 60)

    figures_dir = output_dir / 'figures'
    figures_dir.mkdir(exist_ok=True)

    print("  - Prime counting function...")
    plot_prime_counts(tables['counts'], figures_dir / 'prime_counts.png')

    print("  - Prime gaps...")
    gaps = prime_gaps(Sieve(max(config['limits'])).primes())
    plot_gap_histogram(gaps, figures_dir / 'prime_gaps.png')

    print()

    # Summary
    total_time = time.time() - total_start
    print("=" * 60)
    print("COMPLETE")
    print("=" * 60)
    print(f"\nTotal runtime: {total_time:.1f}s")
    print(f"\nOutputs saved to: {output_dir.absolute()}")
    print(f"\nGenerated files:")

    for f in sorted(output_dir.glob('*.csv')):
        print(f"  - {f.name}")

    print(f"\nFigures:")
    for f in sorted(figures_dir.glob('*.png')):
        print(f"  - figures/{f.name}")

    # Print key results
    print("\n" + "=" * 60)
    print("KEY RESULTS")
    print("=" * 60)

    print("\nPrime counting function:")
    print(tables['counts'][['limit', 'count', 'pnt_ratio', 'max_gap']].to_string(index=False))

    print("\nn-th primes and prime sums:")
    print(tables['sums'][['n', 'nth_prime', 'sum']].to_string(index=False))

    print("\nConstellations:")
    print(tables['constellations'].to_string(index=False))


if __name__ == '__main__':
    main()

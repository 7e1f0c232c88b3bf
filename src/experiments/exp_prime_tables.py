"""
Experiment: Reference Prime Tables

Regenerates the classical tables the sieve is checked against:
π(10^k), sums of the first n primes, n-th primes, and counts of
twin primes and prime triples.

Usage:
    python -m src.experiments.exp_prime_tables --max-exp 6 --save
"""

import argparse
import time
import pandas as pd
from pathlib import Path
from typing import Dict, List

from ..bit_sieve import Sieve
from ..metrics import pnt_estimate, pnt_ratio, summarize_gaps
from ..patterns import CONSTELLATIONS, count_constellations, prime_sum


def prime_count_table(limits: List[int], verbose: bool = True) -> pd.DataFrame:
    """
    Compute π(x) for each limit and compare with x / ln x.

    Parameters
    ----------
    limits : list
        Sieve limits.
    verbose : bool
        Print progress.

    Returns
    -------
    pd.DataFrame
        Columns: limit, count, pnt_estimate, pnt_ratio, max_gap, max_gap_start, seconds.
    """
    rows = []
    for limit in limits:
        t0 = time.time()
        sieve = Sieve(limit)
        count = sieve.prime_count()
        elapsed = time.time() - t0
        gaps = summarize_gaps(sieve.primes())

        rows.append({
            'limit': limit,
            'count': count,
            'pnt_estimate': pnt_estimate(limit),
            'pnt_ratio': pnt_ratio(count, limit),
            'max_gap': gaps['max'],
            'max_gap_start': gaps['max_start'],
            'seconds': elapsed,
        })
        if verbose:
            print(f"  π({limit:,}) = {count:,}  ({elapsed:.2f}s)")

    return pd.DataFrame(rows)


def prime_sum_table(counts: List[int], verbose: bool = True) -> pd.DataFrame:
    """
    Sum of the first n primes and the n-th prime, using count-sized sieves.

    Returns
    -------
    pd.DataFrame
        Columns: n, nth_prime, sum, limit.
    """
    rows = []
    for n in counts:
        sieve = Sieve.for_count(n)
        nth = sieve.nth_prime(n)
        total = prime_sum(sieve, n)
        rows.append({
            'n': n,
            'nth_prime': nth,
            'sum': total,
            'limit': sieve.limit,
        })
        if verbose:
            print(f"  p_{n:,} = {nth:,}, sum = {total:,}")

    return pd.DataFrame(rows)


def constellation_table(sizes: List[int], verbose: bool = True) -> pd.DataFrame:
    """
    Count each named constellation with starting point <= size.

    Returns
    -------
    pd.DataFrame
        One row per size, one column per constellation name.
    """
    span = max(max(offsets) for offsets in CONSTELLATIONS.values())
    rows = []
    for size in sizes:
        sieve = Sieve(size + span)
        row: Dict[str, int] = {'size': size}
        for name, offsets in CONSTELLATIONS.items():
            row[name] = count_constellations(sieve, offsets, size)
        rows.append(row)
        if verbose:
            print(f"  n <= {size:,}: " + ", ".join(f"{k}={row[k]:,}" for k in CONSTELLATIONS))

    return pd.DataFrame(rows)


def run_prime_tables(limits: List[int], sum_counts: List[int],
                     constellation_sizes: List[int], output_dir: Path = None,
                     verbose: bool = True) -> Dict[str, pd.DataFrame]:
    """
    Build all tables, optionally saving CSVs and a markdown summary.

    Returns
    -------
    dict
        {'counts': df, 'sums': df, 'constellations': df}
    """
    if verbose:
        print("Prime counting function")
    df_counts = prime_count_table(limits, verbose)

    if verbose:
        print("Sums of the first n primes")
    df_sums = prime_sum_table(sum_counts, verbose)

    if verbose:
        print("Prime constellations")
    df_const = constellation_table(constellation_sizes, verbose)

    if output_dir is not None:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        df_counts.to_csv(output_dir / 'prime_counts.csv', index=False)
        df_sums.to_csv(output_dir / 'prime_sums.csv', index=False)
        df_const.to_csv(output_dir / 'constellations.csv', index=False)

        md_path = output_dir / 'tables.md'
        with open(md_path, 'w') as f:
            f.write("# Prime Tables\n\n")
            f.write("| x | π(x) | x / ln x | ratio |\n")
            f.write("|---|------|----------|-------|\n")
            for row in df_counts.to_dict('records'):
                f.write(f"| {row['limit']:,} | {row['count']:,} | {row['pnt_estimate']:,.1f} | {row['pnt_ratio']:.4f} |\n")
            f.write("\n| n | p_n | sum of first n primes |\n")
            f.write("|---|-----|-----------------------|\n")
            for row in df_sums.to_dict('records'):
                f.write(f"| {row['n']:,} | {row['nth_prime']:,} | {row['sum']:,} |\n")
        if verbose:
            print(f"\nSaved to {output_dir}")

    return {'counts': df_counts, 'sums': df_sums, 'constellations': df_const}


def main():
    parser = argparse.ArgumentParser(description="Reference prime tables")
    parser.add_argument('--max-exp', type=int, default=6, help='Largest power of ten (default: 6)')
    parser.add_argument('--save', action='store_true', help='Save results to data/reference/')
    args = parser.parse_args()

    powers = [10**k for k in range(1, args.max_exp + 1)]
    output_dir = Path('data/reference/prime_tables') if args.save else None
    run_prime_tables(powers, powers, powers, output_dir)


if __name__ == '__main__':
    main()

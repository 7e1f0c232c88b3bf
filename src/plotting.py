"""
Visualization utilities.

Responsibility: plots only. No logic, no computation.
"""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Optional


def plot_prime_counts(df: pd.DataFrame, output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot pi(x) against the x / ln x estimate.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame from exp_prime_tables.prime_count_table with columns:
        limit, count, pnt_estimate, pnt_ratio.
    output_path : Path, optional
        If provided, save figure to this path.

    Returns
    -------
    matplotlib.Figure
    """
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    ax = axes[0]
    ax.loglog(df['limit'], df['count'], 'o-', label='π(x) (sieve)')
    ax.loglog(df['limit'], df['pnt_estimate'], 's--', label='x / ln x')
    ax.set_xlabel('x')
    ax.set_ylabel('Number of primes ≤ x')
    ax.set_title('Prime counting function')
    ax.legend()
    ax.grid(True, alpha=0.3)

    ax = axes[1]
    ax.semilogx(df['limit'], df['pnt_ratio'], 'o-')
    ax.axhline(y=1, color='gray', linestyle='--', alpha=0.5)
    ax.set_xlabel('x')
    ax.set_ylabel('π(x) / (x / ln x)')
    ax.set_title('Convergence to the prime number theorem')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig


def plot_gap_histogram(gaps: np.ndarray, output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot the distribution of gaps between consecutive primes.

    Parameters
    ----------
    gaps : np.ndarray
        Array from metrics.prime_gaps.
    output_path : Path, optional
        If provided, save figure.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(8, 5))

    if len(gaps) > 0:
        values, counts = np.unique(gaps, return_counts=True)
        ax.bar(values, counts, width=1.5, alpha=0.7, edgecolor='black')
        ax.set_yscale('log')

    ax.set_xlabel('Gap')
    ax.set_ylabel('Frequency')
    ax.set_title(f'Prime gaps (n={len(gaps):,})')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig

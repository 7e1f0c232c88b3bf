"""
Smoke tests for figure generation (non-interactive backend).
"""

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import numpy as np
import pytest

from src.bit_sieve import Sieve
from src.metrics import prime_gaps
from src.plotting import plot_prime_counts, plot_gap_histogram


def test_plot_prime_counts(tmp_path):
    from src.experiments.exp_prime_tables import prime_count_table

    df = prime_count_table([100, 1000, 10000], verbose=False)
    path = tmp_path / 'prime_counts.png'
    fig = plot_prime_counts(df, path)
    assert path.exists()
    plt.close(fig)


def test_plot_gap_histogram(tmp_path):
    gaps = prime_gaps(Sieve(10000).primes())
    path = tmp_path / 'gaps.png'
    fig = plot_gap_histogram(gaps, path)
    assert path.exists()
    plt.close(fig)


def test_plot_gap_histogram_empty():
    fig = plot_gap_histogram(np.array([], dtype=np.int64))
    assert fig is not None
    plt.close(fig)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])

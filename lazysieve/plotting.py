"""
Visualization utilities.

Responsibility: plots only. No logic, no computation.
"""

import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Optional


def plot_inspection_counts(df: pd.DataFrame, output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot raw naturals inspected against the number of primes requested.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame from exp_laziness with columns n, nth_prime,
        naturals_inspected.
    output_path : Path, optional
        If provided, save figure to this path.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(8, 6))

    ax.plot(df['n'], df['naturals_inspected'], 'o-', label='Inspected')
    ax.plot(df['n'], df['nth_prime'] - 1, 's--', label='p_n - 1')

    ax.set_xlabel('n (primes requested)')
    ax.set_ylabel('Raw naturals inspected')
    ax.set_title('Laziness of the prime pipeline')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig


def plot_capture_hazard(prefix: pd.DataFrame, output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot engine output against the shared-divisor baseline.

    Parameters
    ----------
    prefix : pd.DataFrame
        capture_hazard_prefix table (index, engine, shared_divisor).
    output_path : Path, optional
        If provided, save figure to this path.
    """
    fig, ax = plt.subplots(figsize=(8, 6))

    ax.plot(prefix['index'], prefix['engine'], 'o-', label='Frozen divisor per stage')
    ax.plot(prefix['index'], prefix['shared_divisor'], '^-', label='Shared mutable divisor')

    ax.set_xlabel('Output index')
    ax.set_ylabel('Value')
    ax.set_title('Capture hazard')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig

"""
Experiment: Laziness of the prime pipeline

Counts how many raw naturals the engine inspects to emit the first n
primes. For a lazy engine this is exactly p_n - 1 (the naturals 2..p_n)
and does not depend on any larger n that was never requested.
"""

import pandas as pd
from pathlib import Path
from typing import List

from ..naturals import CountingNaturals, INT64_MAX
from ..sieve_engine import SieveEngine
from ..metrics import count_composites, is_strictly_increasing


def measure_inspection(n: int, max_value: int = INT64_MAX) -> dict:
    """
    Run a fresh engine for n primes with an instrumented generator.

    Returns
    -------
    dict
        n, nth_prime, naturals_inspected, stages, increasing, composites.
    """
    counter = CountingNaturals(max_value)
    engine = SieveEngine(counter)
    primes = engine.take(n)
    return {
        'n': n,
        'nth_prime': int(primes[-1]) if n > 0 else None,
        'naturals_inspected': counter.inspected,
        'stages': len(engine.stages),
        'increasing': is_strictly_increasing(primes),
        'composites': count_composites(primes),
    }


def run_laziness_experiment(n_grid: List[int], output_dir: Path,
                            max_value: int = INT64_MAX) -> pd.DataFrame:
    """
    Measure inspection counts over n_grid and save laziness.csv.

    Parameters
    ----------
    n_grid : list of int
        Prefix lengths to request.
    output_dir : Path
        Directory for output files.
    max_value : int
        Generator bound.

    Returns
    -------
    pd.DataFrame
        One row per n.
    """
    print(f"Running laziness experiment with n_grid={n_grid}")

    rows = []
    for n in n_grid:
        row = measure_inspection(n, max_value)
        print(f"  n={n:,}: inspected {row['naturals_inspected']:,} naturals")
        rows.append(row)

    df = pd.DataFrame(rows)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_dir / 'laziness.csv', index=False)
    return df


if __name__ == '__main__':
    from ..config import load_config

    config = load_config('config/default.yaml')

    output_dir = Path('data/results')
    df = run_laziness_experiment(config['n_grid'], output_dir, config['max_value'])
    print("\nSummary:")
    print(df.to_string(index=False))

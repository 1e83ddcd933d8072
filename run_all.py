#!/usr/bin/env python3
"""
Full reproducibility script.

Running this file regenerates every table and figure for the lazy sieve.

Usage:
    python run_all.py
    python run_all.py --config config/custom.yaml
    python run_all.py --output /tmp/results
"""

import argparse
from pathlib import Path
import time

from lazysieve.config import load_config
from lazysieve.experiments.exp_laziness import run_laziness_experiment
from lazysieve.experiments.exp_capture_hazard import run_capture_hazard_experiment
from lazysieve.plotting import plot_inspection_counts, plot_capture_hazard


def main():
    parser = argparse.ArgumentParser(description='Run all lazy sieve experiments')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--output', type=str, default='data/results',
                        help='Directory for tables and figures')
    args = parser.parse_args()

    config = load_config(args.config)

    print("=" * 60)
    print("Lazy Sieve - Full Experiment Suite")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  n_grid = {config['n_grid']}")
    print(f"  hazard_n_grid = {config['hazard_n_grid']}")
    print(f"  max_value = {config['max_value']:,}")
    print()

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    total_start = time.time()

    # 1. Laziness
    print("-" * 60)
    print("1. Laziness of the pipeline")
    print("-" * 60)
    start = time.time()
    df_laziness = run_laziness_experiment(
        config['n_grid'],
        output_dir,
        config['max_value']
    )
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 2. Capture hazard
    print("-" * 60)
    print("2. Shared-divisor capture hazard")
    print("-" * 60)
    start = time.time()
    results_hazard = run_capture_hazard_experiment(
        config['hazard_n_grid'],
        output_dir,
        config['max_value']
    )
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 3. Figures
    print("-" * 60)
    print("3. Generating Figures")
    print("-" * 60)

    figures_dir = output_dir / 'figures'
    figures_dir.mkdir(exist_ok=True)

    print("  - Inspection counts...")
    plot_inspection_counts(df_laziness, figures_dir / 'inspection_counts.png')

    print("  - Capture hazard...")
    plot_capture_hazard(results_hazard['prefix'], figures_dir / 'capture_hazard.png')

    print()

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

    print("\n" + "=" * 60)
    print("KEY RESULTS")
    print("=" * 60)

    print("\nLaziness:")
    print(df_laziness[['n', 'nth_prime', 'naturals_inspected', 'stages']].to_string(index=False))

    print("\nCapture hazard:")
    print(results_hazard['summary'][
        ['n', 'shared_first_divergence', 'shared_composites', 'frozen_composites']
    ].to_string(index=False))


if __name__ == '__main__':
    main()

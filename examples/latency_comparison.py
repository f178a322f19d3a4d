"""Compare request latencies of a baseline and a candidate build.

This example feeds two sets of simulated latency measurements into
PerfTestAnalysis, prints the confidence report and asks whether the
candidate is credibly faster.

Usage:
    python examples/latency_comparison.py
"""

import logging
import random

from perfcompare import AnalysisConfig, PerfTestAnalysis


def simulate_latencies(mean_ms: float, stdev_ms: float, n: int, seed: int) -> list[float]:
    """Draw normally distributed latencies (milliseconds)."""
    rng = random.Random(seed)
    return [rng.gauss(mean_ms, stdev_ms) for _ in range(n)]


def main():
    logging.basicConfig(level=logging.INFO)

    control = simulate_latencies(mean_ms=120.0, stdev_ms=8.0, n=30, seed=1)
    variant = simulate_latencies(mean_ms=114.0, stdev_ms=8.0, n=30, seed=2)

    analysis = PerfTestAnalysis(config=AnalysisConfig(confidence_level=0.95))
    for value in control:
        analysis.add_value_control(value)
    for value in variant:
        analysis.add_value_variant(value)

    analysis.compute_confidence_report()

    for confidence in (0.90, 0.95, 0.99, 0.999):
        faster = analysis.is_variant_less(confidence)
        slower = analysis.is_variant_greater(confidence)
        print(f"  confidence {confidence:.3f}: faster={faster} slower={slower}")


if __name__ == "__main__":
    main()

"""Time Delaunay and Voronoi passes on uniformly random points.

Each run builds a fresh VoronoiSession over the same point set and reports
the Delaunay, Voronoi and total wall time. The incremental strategy is
quadratic, so it is skipped above --incremental-limit points.

Usage
-----
    python benchmarks/benchmark_sweep_circle.py --n-points 100000 --runs 5
"""

import argparse
import json

import numpy as np

from circlesweep import VoronoiSession, configure_logging, get_logger

logger = get_logger('circlesweep.benchmark')


def generate_points(n, seed=0, integer=True):
    """n points in [0, 2**31); integer coordinates may repeat, like a raw RNG feed."""
    rng = np.random.default_rng(seed)
    if integer:
        return rng.integers(0, 2**31 - 1, size=(n, 2)).astype(np.float64)
    return rng.uniform(0.0, 2**31 - 1, size=(n, 2))


def benchmark_strategy(points, strategy, runs, width, height):
    results = []
    for i in range(runs):
        session = VoronoiSession(points, strategy=strategy)
        session.compute_delaunay()
        session.compute_voronoi(width, height)
        st = session.stats
        results.append(st.to_dict())
        logger.info("%s %d points (run %d): Delaunay %.2f s, Voronoi %.2f s, Total %.2f s",
                    strategy, len(points), i + 1, st.time_delaunay, st.time_voronoi,
                    st.time_delaunay + st.time_voronoi)
    return results


def summarize(results):
    totals = np.array([r['time_total'] for r in results])
    return {
        'runs': len(results),
        'triangles': results[0]['triangles'] if results else 0,
        'time_mean': float(totals.mean()) if totals.size else 0.0,
        'time_min': float(totals.min()) if totals.size else 0.0,
        'time_max': float(totals.max()) if totals.size else 0.0,
    }


def main():
    parser = argparse.ArgumentParser(description='Benchmark circlesweep triangulation strategies')
    parser.add_argument('--n-points', type=int, default=100_000,
                        help='Number of random points (default: 100000)')
    parser.add_argument('--runs', type=int, default=10,
                        help='Timed runs per strategy (default: 10)')
    parser.add_argument('--seed', type=int, default=0,
                        help='RNG seed (default: 0)')
    parser.add_argument('--float-coords', action='store_true',
                        help='Use continuous coordinates instead of integers')
    parser.add_argument('--incremental-limit', type=int, default=2000,
                        help='Largest point count for the O(n^2) incremental strategy (default: 2000)')
    parser.add_argument('--log-level', type=str, default='INFO',
                        help='circlesweep logger level (default: INFO)')
    parser.add_argument('--output', type=str, default=None,
                        help='Output JSON file for results')
    args = parser.parse_args()

    configure_logging(args.log_level)
    points = generate_points(args.n_points, args.seed, integer=not args.float_coords)

    results = {}
    strategies = ['sweep_circle']
    if args.n_points <= args.incremental_limit:
        strategies.append('incremental')
    else:
        logger.info("skipping incremental strategy for %d points (limit %d)",
                    args.n_points, args.incremental_limit)

    for strategy in strategies:
        runs = benchmark_strategy(points, strategy, args.runs, 1.0, 1.0)
        results[strategy] = {'runs': runs, 'summary': summarize(runs)}
        s = results[strategy]['summary']
        logger.info("%s: mean %.3f s, min %.3f s, max %.3f s over %d runs",
                    strategy, s['time_mean'], s['time_min'], s['time_max'], s['runs'])

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(results, f, indent=2)
        logger.info("Results saved to %s", args.output)


if __name__ == '__main__':
    main()

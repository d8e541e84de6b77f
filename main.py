#!/usr/bin/env python3
"""
raymath - Vector and ray math for ray tracing

Prints sampling statistics and evaluates a ray, as a quick sanity check.
"""

import argparse
import sys
from typing import List, Optional

import numpy as np

from raymath.vec3 import Vec3, Point3
from raymath.ray import Ray
from raymath.sampling import random_in_unit_sphere
from raymath.settings import SamplingSettings
from raymath.log import raymath_logger, set_up_simple_logging


def sphere_statistics(samples: int, rng: np.random.Generator) -> dict:
    """Draw points in the unit sphere and summarize them."""
    points = np.array([random_in_unit_sphere(rng).to_array() for _ in range(samples)])
    squared = np.einsum('ij,ij->i', points, points)
    return {
        'mean': Vec3.from_array(points.mean(axis=0)),
        'max_squared_length': float(squared.max()),
        'second_moments': Vec3.from_array((points ** 2).mean(axis=0)),
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='raymath - Vector and ray math for ray tracing',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --samples 50000 --seed 7
  python main.py --origin 0 0 0 --direction 1 0 0 --t 0 5 -2
        '''
    )

    parser.add_argument('--samples', type=int, default=10000,
                        help='Points to draw in the unit sphere (default: 10000)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--origin', type=float, nargs=3, default=[0.0, 0.0, 0.0],
                        metavar=('X', 'Y', 'Z'), help='Ray origin (default: 0 0 0)')
    parser.add_argument('--direction', type=float, nargs=3, default=[1.0, 0.0, 0.0],
                        metavar=('X', 'Y', 'Z'), help='Ray direction (default: 1 0 0)')
    parser.add_argument('--t', type=float, nargs='+', default=[0.0, 1.0],
                        help='Ray parameters to evaluate (default: 0 1)')
    parser.add_argument('--log-level', type=str, default='WARNING', help='Log level (default: WARNING)')

    args = parser.parse_args(argv)

    settings = SamplingSettings(seed=args.seed, num_streams=1, log_level=args.log_level)
    previous_level = raymath_logger.level
    handler = set_up_simple_logging(settings.log_level)

    try:
        print("=" * 60)
        print("raymath")
        print("=" * 60)

        if args.samples > 0:
            stats = sphere_statistics(args.samples, settings.create_generators()[0])
            print(f"\nUnit sphere sampling ({args.samples} points):")
            print(f"  Mean: {stats['mean']}")
            print(f"  Max squared length: {stats['max_squared_length']:.6f}")
            print(f"  Second moments: {stats['second_moments']} (uniform ball: 0.2)")

        ray = Ray(Point3(*args.origin), Vec3(*args.direction))
        print(f"\n{ray}")
        for t in args.t:
            print(f"  t={t:g}: {ray(t)}")
    finally:
        raymath_logger.removeHandler(handler)
        raymath_logger.setLevel(previous_level)
    return 0


if __name__ == '__main__':
    sys.exit(main())

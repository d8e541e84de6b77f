"""
Geometric helpers used by the shading models.

- reflect: mirror a direction about a surface normal
- random_in_unit_sphere: uniform point inside the unit ball

Random draws come from an explicit numpy Generator. When none is passed, each
thread gets its own default generator, so worker threads never share state.
"""

from __future__ import annotations
import threading
from typing import List, Optional
import numpy as np

from .log import get_logger
from .vec3 import Vec3, dot

module_logger = get_logger("sampling")

_thread_state = threading.local()


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create an independent generator (seeded from OS entropy if seed is None)."""
    module_logger.debug("Creating generator with seed %s", seed)
    return np.random.default_rng(seed)


def spawn_rngs(seed: Optional[int], n: int) -> List[np.random.Generator]:
    """Create n statistically independent generators, one per worker.

    Args:
        seed: Root seed (None for OS entropy)
        n: Number of generators

    Returns:
        List of generators derived from a single SeedSequence
    """
    children = np.random.SeedSequence(seed).spawn(n)
    module_logger.debug("Spawned %d generators from seed %s", n, seed)
    return [np.random.default_rng(s) for s in children]


def default_rng() -> np.random.Generator:
    """Return the calling thread's default generator, creating it on first use."""
    rng = getattr(_thread_state, 'rng', None)
    if rng is None:
        rng = make_rng()
        _thread_state.rng = rng
    return rng


def seed_default_rng(seed: Optional[int]) -> None:
    """Reseed the calling thread's default generator."""
    _thread_state.rng = make_rng(seed)


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Reflect v about the normal n (n must be unit length)."""
    return v - 2 * dot(v, n) * n


def random_in_unit_sphere(rng: Optional[np.random.Generator] = None) -> Vec3:
    """Generate a random point inside the unit sphere.

    Candidates are drawn uniformly from the cube [-1, 1)^3 until one falls
    strictly inside the ball. There is no retry limit.
    """
    if rng is None:
        rng = default_rng()
    while True:
        p = 2.0 * Vec3._wrap(rng.random(3)) - Vec3(1.0)
        if p.squared_length() < 1.0:
            return p

"""
raymath - Vector and ray math for ray tracing

The geometric foundation of a ray tracer:
- Vec2 / Vec3 value types with IEEE float64 semantics
- Dot, cross and elementwise products
- Reflection and uniform sampling inside the unit sphere
- Parametric rays
"""

__version__ = "0.1.0"
__author__ = "raymath Team"

from .vec2 import Vec2
from .vec3 import Vec3, Point3, Color, dot, cross
from .ray import Ray
from .sampling import (
    reflect, random_in_unit_sphere,
    make_rng, spawn_rngs, default_rng, seed_default_rng
)
from .settings import SamplingSettings
from .log import LOGGER_ID, get_logger, set_up_simple_logging

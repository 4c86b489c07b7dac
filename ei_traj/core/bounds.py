"""Lower/upper limit vectors for trajectory optimisation.

Each quantity starts from a category default and is overwritten at the
ordinal of every joint that declares an explicit limit. Positions default to
``(-inf, inf)``. Velocity, acceleration and jerk default to a large finite
limit instead, because infinite bounds on those quantities make the
optimiser fail.

Only single-DOF joints are supported: every joint contributes exactly one
entry, and joints with several variables raise ``RuntimeError``.
"""

from __future__ import annotations

import logging
from typing import Dict, NamedTuple

import numpy as np

from .core import MotionGroup, VariableBounds, VectorSpace
from .indexing import joint_ordinals

log = logging.getLogger(__name__)

DEFAULT_VELOCITY_LIMIT = 100.0
DEFAULT_ACCELERATION_LIMIT = 100.0
DEFAULT_JERK_LIMIT = 100.0


class Bounds(NamedTuple):
    lower: np.ndarray
    upper: np.ndarray


def _extract(group: MotionGroup, space: VectorSpace, quantity: str, size: int,
             default_lower: float, default_upper: float) -> Bounds:
    # Positions and velocities share the same name->ordinal mapping; the
    # capacity check follows the vector being filled.
    ordinals = joint_ordinals(group, space, "position" if quantity == "position" else "velocity")
    lower = np.full(size, default_lower, dtype=float)
    upper = np.full(size, default_upper, dtype=float)

    for joint in group.joints:
        bounds: VariableBounds = joint.variable_bounds[0]
        if getattr(bounds, f"{quantity}_bounded"):
            index = ordinals[joint.name]
            lower[index] = getattr(bounds, f"min_{quantity}")
            upper[index] = getattr(bounds, f"max_{quantity}")

    log.debug("Extracted %s bounds for group '%s' (%d entries)", quantity, group.name, size)
    return Bounds(lower, upper)


def position_bounds(group: MotionGroup, space: VectorSpace) -> Bounds:
    return _extract(group, space, "position", space.num_positions, -np.inf, np.inf)


def velocity_bounds(group: MotionGroup, space: VectorSpace,
                    default_limit: float = DEFAULT_VELOCITY_LIMIT) -> Bounds:
    return _extract(group, space, "velocity", space.num_velocities, -default_limit, default_limit)


def acceleration_bounds(group: MotionGroup, space: VectorSpace,
                        default_limit: float = DEFAULT_ACCELERATION_LIMIT) -> Bounds:
    return _extract(group, space, "acceleration", space.num_accelerations, -default_limit, default_limit)


def jerk_bounds(group: MotionGroup, space: VectorSpace,
                default_limit: float = DEFAULT_JERK_LIMIT) -> Bounds:
    return _extract(group, space, "jerk", space.num_velocities, -default_limit, default_limit)


def all_bounds(group: MotionGroup, space: VectorSpace) -> Dict[str, Bounds]:
    """Bounds for every quantity, keyed by ``position``/``velocity``/``acceleration``/``jerk``."""
    return {
        "position": position_bounds(group, space),
        "velocity": velocity_bounds(group, space),
        "acceleration": acceleration_bounds(group, space),
        "jerk": jerk_bounds(group, space),
    }

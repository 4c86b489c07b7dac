"""Pack named joint values into dense vectors and back."""

from __future__ import annotations

from typing import Dict, Optional, Sequence

import numpy as np

from .core import MotionGroup, VectorSpace, Waypoint
from .indexing import capacity, joint_ordinals


def pack(state: Waypoint, group: MotionGroup, space: VectorSpace, quantity: str = "position") -> np.ndarray:
    """Return a zero-filled vector with the group's joint values at their ordinals."""

    size = capacity(space, quantity)
    ordinals = joint_ordinals(group, space, quantity)
    vec = np.zeros(size, dtype=float)
    for name, index in ordinals.items():
        if quantity == "position":
            vec[index] = state.joint_position(name)
        else:
            vec[index] = state.joint_velocity(name)
    return vec


def unpack(vector: Sequence[float], group: MotionGroup, space: VectorSpace, quantity: str = "position",
           out: Optional[Waypoint] = None) -> Dict[str, float]:
    """Read the group's joint values out of ``vector``.

    When ``out`` is given the values are also written into its positions or
    velocities.
    """

    vec = np.asarray(vector, dtype=float)
    size = capacity(space, quantity)
    if vec.shape != (size,):
        raise ValueError(f"{quantity} vector must have shape ({size},). Got {vec.shape}")

    values = {name: float(vec[index]) for name, index in joint_ordinals(group, space, quantity).items()}
    if out is not None:
        target = out.positions if quantity == "position" else out.velocities
        target.update(values)
    return values


def joint_position_vector(state: Waypoint, group: MotionGroup, space: VectorSpace) -> np.ndarray:
    return pack(state, group, space, "position")


def joint_velocity_vector(state: Waypoint, group: MotionGroup, space: VectorSpace) -> np.ndarray:
    return pack(state, group, space, "velocity")

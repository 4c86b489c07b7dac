from .bounds import (
    DEFAULT_ACCELERATION_LIMIT,
    DEFAULT_JERK_LIMIT,
    DEFAULT_VELOCITY_LIMIT,
    Bounds,
    acceleration_bounds,
    all_bounds,
    jerk_bounds,
    position_bounds,
    velocity_bounds,
)
from .conversions import fit_trajectory, resample_trajectory, sample_times
from .core import Joint, MotionGroup, Trajectory, VariableBounds, VectorSpace, Waypoint
from .indexing import joint_ordinals
from .interpolation import FirstOrderHold
from .packing import joint_position_vector, joint_velocity_vector, pack, unpack

__all__ = [
    "DEFAULT_ACCELERATION_LIMIT",
    "DEFAULT_JERK_LIMIT",
    "DEFAULT_VELOCITY_LIMIT",
    "Bounds",
    "FirstOrderHold",
    "Joint",
    "MotionGroup",
    "Trajectory",
    "VariableBounds",
    "VectorSpace",
    "Waypoint",
    "acceleration_bounds",
    "all_bounds",
    "fit_trajectory",
    "jerk_bounds",
    "joint_ordinals",
    "joint_position_vector",
    "joint_velocity_vector",
    "pack",
    "position_bounds",
    "resample_trajectory",
    "sample_times",
    "unpack",
    "velocity_bounds",
]

"""Conversions between named-joint waypoint trajectories and dense piecewise trajectories."""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np

from .core import MotionGroup, PiecewiseTrajectory, Trajectory, VectorSpace, Waypoint
from .interpolation import FirstOrderHold
from .packing import pack, unpack

log = logging.getLogger(__name__)


def fit_trajectory(trajectory: Trajectory, group: MotionGroup, space: VectorSpace) -> FirstOrderHold:
    """Fit a first-order hold through the waypoint positions of ``trajectory``.

    Each waypoint becomes one break at its time from start, with its joint
    positions packed into a dense vector of ``space.num_positions`` entries.

    Raises
    ------
    ValueError
        If there are fewer than two waypoints or the waypoint times are not
        strictly increasing.
    """

    count = trajectory.waypoint_count()
    if count < 2:
        raise ValueError(f"At least two waypoints are required to fit a trajectory. Got {count}")
    breaks = trajectory.times()
    if np.any(np.diff(breaks) <= 0.0):
        raise ValueError(f"Waypoint times must be strictly increasing. Got {breaks.tolist()}")

    samples = [pack(trajectory.waypoint(i), group, space, "position") for i in range(count)]
    log.debug("Fitting first-order hold through %d waypoints over [%.3f, %.3f]s",
              count, breaks[0], breaks[-1])
    return FirstOrderHold(breaks, samples)


def sample_times(end_time: float, delta_t: float) -> np.ndarray:
    """Absolute sample times covering ``[0, end_time]`` with step at most ``delta_t``.

    The count is ``ceil(end_time / delta_t) + 1`` and the last sample lands on
    ``end_time`` exactly.
    """

    if not math.isfinite(delta_t) or delta_t <= 0.0:
        raise ValueError(f"delta_t must be a positive finite number. Got {delta_t}")
    if not math.isfinite(end_time) or end_time < 0.0:
        raise ValueError(f"end_time must be a non-negative finite number. Got {end_time}")

    num_pts = int(math.ceil(end_time / delta_t)) + 1
    times = np.empty(num_pts, dtype=float)
    for i in range(num_pts):
        scale = i / (num_pts - 1) if num_pts > 1 else 0.0
        times[i] = min(scale, 1.0) * end_time
    return times


def resample_trajectory(piecewise: PiecewiseTrajectory, delta_t: float, space: VectorSpace,
                        output: Trajectory, group: Optional[MotionGroup] = None) -> Trajectory:
    """Sample ``piecewise`` every ``delta_t`` seconds into ``output``.

    Every waypoint receives the positions and first derivatives of the group's
    joints and is appended with the time elapsed since the previous sample.
    ``group`` defaults to ``output.group``.

    The derivative of ``piecewise`` is the derivative of its position vector,
    so velocities are read at the joints' position ordinals. ``output`` is only
    cleared once every sample has been evaluated; on error it is left as is.
    """

    group = output.group if group is None else group
    times = sample_times(piecewise.end_time(), delta_t)

    samples = []
    t_prev = 0.0
    for t in times:
        waypoint = Waypoint()
        unpack(piecewise.value(t), group, space, "position", out=waypoint)
        waypoint.velocities.update(unpack(piecewise.derivative(t), group, space, "position"))
        samples.append((waypoint, t - t_prev))
        t_prev = t

    output.clear()
    for waypoint, dt in samples:
        output.add_suffix_waypoint(waypoint, dt)

    log.debug("Resampled %.3fs trajectory into %d waypoints (delta_t=%.3f)",
              piecewise.end_time(), len(times), delta_t)
    return output

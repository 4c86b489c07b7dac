"""Plain data types shared by the conversion helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Protocol, Tuple

import numpy as np


@dataclass
class VariableBounds:
    """Per-variable limits; each quantity is only enforced when its flag is set."""

    position_bounded: bool = False
    min_position: float = 0.0
    max_position: float = 0.0
    velocity_bounded: bool = False
    min_velocity: float = 0.0
    max_velocity: float = 0.0
    acceleration_bounded: bool = False
    min_acceleration: float = 0.0
    max_acceleration: float = 0.0
    jerk_bounded: bool = False
    min_jerk: float = 0.0
    max_jerk: float = 0.0


@dataclass
class Joint:
    name: str
    variable_bounds: List[VariableBounds] = field(default_factory=lambda: [VariableBounds()])

    @property
    def variable_count(self) -> int:
        return len(self.variable_bounds)


@dataclass
class MotionGroup:
    """Ordered set of active joints that a planner moves together."""

    name: str
    joints: List[Joint]

    @property
    def joint_names(self) -> List[str]:
        return [j.name for j in self.joints]

    def get_joint(self, name: str) -> Joint:
        for joint in self.joints:
            if joint.name == name:
                return joint
        raise KeyError(f"Joint '{name}' is not part of group '{self.name}'")

    def __len__(self) -> int:
        return len(self.joints)


@dataclass
class VectorSpace:
    """Dense indexing used by the dynamics model (qpos / qvel layout)."""

    num_positions: int
    num_velocities: int
    ordinals: Dict[str, int]

    @property
    def num_accelerations(self) -> int:
        return self.num_velocities

    def ordinal(self, name: str) -> int:
        try:
            return self.ordinals[name]
        except KeyError:
            raise RuntimeError(f"Joint '{name}' does not exist in the vector space") from None


@dataclass
class Waypoint:
    positions: Dict[str, float] = field(default_factory=dict)
    velocities: Dict[str, float] = field(default_factory=dict)

    def joint_position(self, name: str) -> float:
        return float(self.positions.get(name, 0.0))

    def joint_velocity(self, name: str) -> float:
        return float(self.velocities.get(name, 0.0))

    def set_joint_position(self, name: str, value: float) -> None:
        self.positions[name] = float(value)

    def set_joint_velocity(self, name: str, value: float) -> None:
        self.velocities[name] = float(value)


class Trajectory:
    """Sequence of waypoints, each stored with the time elapsed since its predecessor."""

    def __init__(self, group: MotionGroup):
        self.group = group
        self._waypoints: List[Waypoint] = []
        self._durations: List[float] = []

    def waypoint_count(self) -> int:
        return len(self._waypoints)

    def __len__(self) -> int:
        return len(self._waypoints)

    def __iter__(self) -> Iterator[Tuple[Waypoint, float]]:
        return iter(zip(self._waypoints, self._durations))

    def waypoint(self, index: int) -> Waypoint:
        return self._waypoints[index]

    def waypoint_duration(self, index: int) -> float:
        return self._durations[index]

    def waypoint_duration_from_start(self, index: int) -> float:
        if not self._durations:
            return 0.0
        index = min(index, len(self._durations) - 1)
        return float(sum(self._durations[: index + 1]))

    @property
    def duration(self) -> float:
        return float(sum(self._durations))

    def clear(self) -> None:
        self._waypoints.clear()
        self._durations.clear()

    def add_suffix_waypoint(self, waypoint: Waypoint, dt: float) -> "Trajectory":
        if dt < 0.0:
            raise ValueError(f"Waypoint duration must be non-negative. Got {dt}")
        self._waypoints.append(waypoint)
        self._durations.append(float(dt))
        return self

    def times(self) -> np.ndarray:
        """Cumulative time of every waypoint, shape ``(T,)``."""
        return np.cumsum(np.asarray(self._durations, dtype=float))

    def positions(self, joint_names: Optional[List[str]] = None) -> np.ndarray:
        """Joint positions in group order, shape ``(T, n_joints)``."""
        names = self.group.joint_names if joint_names is None else joint_names
        q = np.zeros((len(self._waypoints), len(names)), dtype=float)
        for i, wp in enumerate(self._waypoints):
            for j, name in enumerate(names):
                q[i, j] = wp.joint_position(name)
        return q


class PiecewiseTrajectory(Protocol):
    """Continuous evaluator consumed by the resampler."""

    def start_time(self) -> float: ...

    def end_time(self) -> float: ...

    def value(self, t: float) -> np.ndarray: ...

    def derivative(self, t: float, order: int = 1) -> np.ndarray: ...

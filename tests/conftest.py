import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ei_traj.core import Joint, MotionGroup, VariableBounds, VectorSpace, Waypoint


@pytest.fixture
def group():
    return MotionGroup(
        name="arm",
        joints=[
            Joint("shoulder", [VariableBounds(position_bounded=True, min_position=-1.5, max_position=1.5,
                                              velocity_bounded=True, min_velocity=-2.0, max_velocity=2.0)]),
            Joint("elbow", [VariableBounds(acceleration_bounded=True, min_acceleration=-5.0,
                                           max_acceleration=4.0)]),
            Joint("wrist", [VariableBounds(jerk_bounded=True, min_jerk=-30.0, max_jerk=30.0)]),
        ],
    )


@pytest.fixture
def space():
    # Ordinals deliberately differ from group order and leave room for a
    # joint outside the group.
    return VectorSpace(
        num_positions=5,
        num_velocities=5,
        ordinals={"base": 0, "wrist": 1, "shoulder": 2, "gripper": 3, "elbow": 4},
    )


@pytest.fixture
def state():
    return Waypoint(
        positions={"shoulder": 0.3, "elbow": -1.2, "wrist": 2.5},
        velocities={"shoulder": 0.1, "elbow": 0.0, "wrist": -0.4},
    )

import numpy as np
import pytest

from ei_traj.core import (
    Joint,
    MotionGroup,
    VariableBounds,
    VectorSpace,
    Waypoint,
    joint_ordinals,
    joint_position_vector,
    joint_velocity_vector,
    pack,
    unpack,
)


def test_joint_ordinals_follow_group_order(group, space):
    ordinals = joint_ordinals(group, space)

    assert list(ordinals) == ["shoulder", "elbow", "wrist"]
    assert ordinals == {"shoulder": 2, "elbow": 4, "wrist": 1}


def test_joint_ordinals_rejects_small_space(group):
    space = VectorSpace(num_positions=2, num_velocities=2, ordinals={"shoulder": 0, "elbow": 1})

    with pytest.raises(RuntimeError, match="3 active joints"):
        joint_ordinals(group, space)


def test_joint_ordinals_rejects_unknown_joint(group):
    space = VectorSpace(num_positions=3, num_velocities=3, ordinals={"shoulder": 0, "elbow": 1})

    with pytest.raises(RuntimeError, match="wrist"):
        joint_ordinals(group, space)


def test_joint_ordinals_rejects_multi_dof_joint(space):
    group = MotionGroup("arm", [Joint("shoulder", [VariableBounds(), VariableBounds()])])

    with pytest.raises(RuntimeError, match="single-DOF"):
        joint_ordinals(group, space)


def test_joint_ordinals_rejects_out_of_range_ordinal():
    group = MotionGroup("arm", [Joint("shoulder")])
    space = VectorSpace(num_positions=2, num_velocities=2, ordinals={"shoulder": 2})

    with pytest.raises(RuntimeError, match="outside"):
        joint_ordinals(group, space)


def test_pack_places_values_at_ordinals_and_zeroes_the_rest(group, space, state):
    q = joint_position_vector(state, group, space)
    v = joint_velocity_vector(state, group, space)

    np.testing.assert_array_equal(q, [0.0, 2.5, 0.3, 0.0, -1.2])
    np.testing.assert_array_equal(v, [0.0, -0.4, 0.1, 0.0, 0.0])
    assert q[0] == 0.0 and q[3] == 0.0


def test_pack_uses_velocity_capacity():
    group = MotionGroup("arm", [Joint("a"), Joint("b")])
    space = VectorSpace(num_positions=3, num_velocities=2, ordinals={"a": 1, "b": 0})
    state = Waypoint(positions={"a": 1.0, "b": 2.0}, velocities={"a": 3.0, "b": 4.0})

    assert pack(state, group, space, "position").shape == (3,)
    np.testing.assert_array_equal(pack(state, group, space, "velocity"), [4.0, 3.0])


def test_pack_is_independent_of_group_order(group, space, state):
    reversed_group = MotionGroup("arm", list(reversed(group.joints)))

    np.testing.assert_array_equal(
        pack(state, group, space), pack(state, reversed_group, space)
    )


def test_unpack_inverts_pack(group, space, state):
    for quantity, expected in (("position", state.positions), ("velocity", state.velocities)):
        values = unpack(pack(state, group, space, quantity), group, space, quantity)
        assert values == pytest.approx(expected)


def test_pack_inverts_unpack(group, space):
    vec = np.array([0.0, 7.0, 8.0, 0.0, 9.0])

    wp = Waypoint()
    unpack(vec, group, space, "position", out=wp)

    assert wp.positions == {"shoulder": 8.0, "elbow": 9.0, "wrist": 7.0}
    np.testing.assert_array_equal(pack(wp, group, space, "position"), vec)


def test_unpack_writes_velocities_into_waypoint(group, space):
    wp = Waypoint(positions={"shoulder": 1.0})
    unpack(np.arange(5.0), group, space, "velocity", out=wp)

    assert wp.positions == {"shoulder": 1.0}
    assert wp.velocities == {"shoulder": 2.0, "elbow": 4.0, "wrist": 1.0}


def test_unpack_rejects_wrong_length(group, space):
    with pytest.raises(ValueError, match="shape"):
        unpack(np.zeros(4), group, space)


def test_unknown_quantity_is_rejected(group, space, state):
    with pytest.raises(ValueError, match="quantity"):
        pack(state, group, space, "effort")


def test_joint_ordinals_rejects_shared_ordinal():
    group = MotionGroup("arm", [Joint("a"), Joint("b")])
    space = VectorSpace(num_positions=3, num_velocities=3, ordinals={"a": 1, "b": 1})

    with pytest.raises(RuntimeError, match="share ordinal 1"):
        joint_ordinals(group, space)
    with pytest.raises(RuntimeError):
        pack(Waypoint(positions={"a": 1.0, "b": 2.0}), group, space)

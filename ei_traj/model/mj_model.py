"""Build motion groups and vector spaces from a MuJoCo model."""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

import mujoco as mj
import numpy as np

from ..core.core import Joint, MotionGroup, VariableBounds, VectorSpace

log = logging.getLogger(__name__)

_SINGLE_DOF = (int(mj.mjtJoint.mjJNT_HINGE), int(mj.mjtJoint.mjJNT_SLIDE))


def _joint_name(m: mj.MjModel, j_id: int) -> str:
    return mj.mj_id2name(m, mj.mjtObj.mjOBJ_JOINT, j_id) or ""


def vector_space_from_mujoco(m: mj.MjModel) -> VectorSpace:
    """Vector space over ``qpos``/``qvel`` with each joint at its ``qposadr``.

    Raises
    ------
    RuntimeError
        If the model contains a free or ball joint, or an unnamed joint.
    """

    ordinals = {}
    for j_id in range(m.njnt):
        name = _joint_name(m, j_id)
        if int(m.jnt_type[j_id]) not in _SINGLE_DOF:
            raise RuntimeError(f"Joint '{name}' is not a single-DOF joint (type {int(m.jnt_type[j_id])}).")
        if not name:
            raise RuntimeError(f"Joint {j_id} has no name and cannot be looked up.")
        ordinals[name] = int(m.jnt_qposadr[j_id])

    return VectorSpace(num_positions=int(m.nq), num_velocities=int(m.nv), ordinals=ordinals)


def _sort_key(nm: str) -> int:
    # Prefer trailing numbers such as "joint5" so links stay in order.
    mnum = re.search(r"(\d+)$", nm) or re.search(r"joint[_-]?(\d+)", nm)
    return int(mnum.group(1)) if mnum else 999


def detect_arm_joints(m: mj.MjModel) -> List[int]:
    """Joint ids of single-DOF arm joints, skipping fingers/grippers."""
    ids, names = [], []
    for j_id in range(m.njnt):
        if int(m.jnt_type[j_id]) not in _SINGLE_DOF:
            continue
        nm = _joint_name(m, j_id)
        low = nm.lower()
        if "finger" in low or "gripper" in low:
            continue
        ids.append(j_id)
        names.append(nm)

    order = np.argsort([_sort_key(n) for n in names], kind="stable")
    return [ids[i] for i in order]


def motion_group_from_mujoco(m: mj.MjModel, name: str = "arm",
                             joint_names: Optional[Sequence[str]] = None) -> MotionGroup:
    """Motion group with position limits taken from ``jnt_range``.

    MJCF carries no velocity, acceleration or jerk limits, so those are left
    unbounded and the bound extractor falls back to its defaults.

    Parameters
    ----------
    m:
        Loaded MuJoCo model.
    name:
        Name of the returned group.
    joint_names:
        Explicit joint selection in the desired order. When omitted the arm
        joints found by :func:`detect_arm_joints` are used.
    """

    if joint_names is None:
        ids = detect_arm_joints(m)
        if len(ids) == 0:
            raise RuntimeError("No arm joints found in model.")
    else:
        ids = []
        for jn in joint_names:
            j_id = mj.mj_name2id(m, mj.mjtObj.mjOBJ_JOINT, jn)
            if j_id < 0:
                raise RuntimeError(f"Joint '{jn}' does not exist in the model.")
            ids.append(j_id)

    joints = []
    for j_id in ids:
        bounds = VariableBounds()
        low, high = m.jnt_range[j_id]
        # ``jnt_range`` is only meaningful for limited joints.
        if bool(m.jnt_limited[j_id]) and low < high:
            bounds.position_bounded = True
            bounds.min_position = float(low)
            bounds.max_position = float(high)
        joints.append(Joint(name=_joint_name(m, j_id), variable_bounds=[bounds]))

    log.debug("Built motion group '%s' with joints %s", name, [j.name for j in joints])
    return MotionGroup(name=name, joints=joints)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import argparse
import logging
import math
import os

import mujoco as mj
import numpy as np

from ei_traj.core import (
    MotionGroup,
    Trajectory,
    Waypoint,
    all_bounds,
    fit_trajectory,
    resample_trajectory,
)
from ei_traj.model import motion_group_from_mujoco, vector_space_from_mujoco

log = logging.getLogger("demo_conversions")


# ---------------------------
# Demo waypoint generation
# ---------------------------
def demo_waypoints(dof: int, num_poses: int = 5, amplitude: float = 0.3) -> np.ndarray:
    """Closed loop of ``num_poses`` example poses (rows=poses, cols=dof).

    Each joint sweeps one sine period around a spread-out base pose, phase
    shifted per joint, so the last pose equals the first.
    """

    if num_poses < 2:
        raise ValueError(f"num_poses must be at least 2. Got {num_poses}")

    base = np.linspace(-0.6, 0.6, dof, dtype=float)
    phase = np.linspace(0.0, math.pi, dof, dtype=float)
    theta = np.linspace(0.0, 2.0 * math.pi, num_poses)

    poses = base[None, :] + amplitude * (np.sin(phase[None, :] + theta[:, None]) - np.sin(phase)[None, :])
    poses[-1] = poses[0]
    return poses


def build_waypoint_trajectory(group: MotionGroup, q_wp: np.ndarray, seg_T: float) -> Trajectory:
    """Wrap ``q_wp`` rows as waypoints spaced ``seg_T`` seconds apart."""
    if q_wp.ndim != 2 or q_wp.shape[1] != len(group.joints):
        raise ValueError(
            f"Waypoints must have shape (N, {len(group.joints)}). Got {q_wp.shape}"
        )
    traj = Trajectory(group)
    for i, row in enumerate(q_wp):
        wp = Waypoint()
        for name, value in zip(group.joint_names, row):
            wp.set_joint_position(name, value)
        traj.add_suffix_waypoint(wp, 0.0 if i == 0 else seg_T)
    return traj


def format_table(traj: Trajectory, deg: bool = False) -> str:
    """Position/velocity table; angles are converted to degrees when ``deg`` is set."""
    scale = math.degrees(1.0) if deg else 1.0
    names = traj.group.joint_names
    unit = "deg" if deg else "rad"
    lines = [f"t[s]     ({unit}) " + " ".join(f"{n:>20}" for n in names)]
    for t, (wp, _) in zip(traj.times(), traj):
        cells = " ".join(
            f"{wp.joint_position(n) * scale:+9.4f}/{wp.joint_velocity(n) * scale:+9.4f}" for n in names
        )
        lines.append(f"{t:7.3f}  {cells}")
    return "\n".join(lines)


# ---------------------------
# Main
# ---------------------------
def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--model", required=True, help="Path to the MJCF model")
    ap.add_argument("--segT", type=float, default=1.5, help="Duration [s] between demo waypoints")
    ap.add_argument("--dt", type=float, default=0.25, help="Resampling interval [s]")
    ap.add_argument("--deg", action="store_true", help="Print joint angles and rates in degrees")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="[%(name)s] %(message)s")

    if not os.path.isfile(args.model):
        raise FileNotFoundError(args.model)

    mj_model = mj.MjModel.from_xml_path(args.model)
    space = vector_space_from_mujoco(mj_model)
    group = motion_group_from_mujoco(mj_model)
    log.info("Arm joints: %s", ", ".join(group.joint_names))

    for quantity, (lower, upper) in all_bounds(group, space).items():
        log.info("%-12s lower=%s upper=%s", quantity, np.array2string(lower, precision=3),
                 np.array2string(upper, precision=3))

    waypoints = build_waypoint_trajectory(group, demo_waypoints(len(group.joints)), args.segT)
    piecewise = fit_trajectory(waypoints, group, space)
    resampled = resample_trajectory(piecewise, args.dt, space, Trajectory(group))
    log.info("Resampled %d waypoints into %d samples over %.2fs",
             waypoints.waypoint_count(), resampled.waypoint_count(), piecewise.end_time())
    print(format_table(resampled, deg=args.deg))
    return resampled


if __name__ == "__main__":
    main()

#!/usr/bin/env python3.9
# -*- coding: utf-8 -*-

from .core import (
    FirstOrderHold,
    Joint,
    MotionGroup,
    Trajectory,
    VariableBounds,
    VectorSpace,
    Waypoint,
    all_bounds,
    fit_trajectory,
    pack,
    resample_trajectory,
    unpack,
)

__all__ = [
    "FirstOrderHold",
    "Joint",
    "MotionGroup",
    "Trajectory",
    "VariableBounds",
    "VectorSpace",
    "Waypoint",
    "all_bounds",
    "fit_trajectory",
    "pack",
    "resample_trajectory",
    "unpack",
]

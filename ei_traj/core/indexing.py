"""Joint-name to vector-ordinal lookup."""

from __future__ import annotations

import logging
from typing import Dict

from .core import MotionGroup, VectorSpace

log = logging.getLogger(__name__)

QUANTITIES = ("position", "velocity")


def capacity(space: VectorSpace, quantity: str) -> int:
    """Length of the dense vector holding ``quantity``."""
    if quantity == "position":
        return int(space.num_positions)
    if quantity == "velocity":
        return int(space.num_velocities)
    raise ValueError(f"quantity must be one of {QUANTITIES}. Got {quantity!r}")


def joint_ordinals(group: MotionGroup, space: VectorSpace, quantity: str = "position") -> Dict[str, int]:
    """Map every active joint of ``group`` to its index in ``space``.

    Parameters
    ----------
    group:
        Motion group whose joints are looked up.
    space:
        Vector space of the dynamics model.
    quantity:
        ``"position"`` checks against ``num_positions``; ``"velocity"`` against
        ``num_velocities``.

    Returns
    -------
    dict[str, int]
        Ordinals keyed by joint name, in group order.

    Raises
    ------
    RuntimeError
        If the space is too small for the group, a joint is missing from the
        space, two joints share an ordinal, or a joint has more than one
        degree of freedom. These are
        configuration mistakes and are never papered over.
    """

    size = capacity(space, quantity)
    if size < len(group.joints):
        raise RuntimeError(
            f"Vector space provides {size} {quantity} entries, but group "
            f"'{group.name}' has {len(group.joints)} active joints."
        )

    ordinals: Dict[str, int] = {}
    for joint in group.joints:
        # Only single-DOF joints map onto one ordinal.
        if joint.variable_count != 1:
            raise RuntimeError(
                f"Joint '{joint.name}' has {joint.variable_count} variables; "
                "only single-DOF joints are supported."
            )
        index = space.ordinal(joint.name)
        if not 0 <= index < size:
            raise RuntimeError(
                f"Ordinal {index} of joint '{joint.name}' is outside the {quantity} vector of size {size}."
            )
        if index in ordinals.values():
            other = next(n for n, i in ordinals.items() if i == index)
            raise RuntimeError(
                f"Joints '{other}' and '{joint.name}' share ordinal {index}."
            )
        ordinals[joint.name] = index

    log.debug("Mapped %d joints of group '%s' onto %d %s entries",
              len(ordinals), group.name, size, quantity)
    return ordinals

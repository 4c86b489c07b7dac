from .mj_model import detect_arm_joints, motion_group_from_mujoco, vector_space_from_mujoco

__all__ = [
    "detect_arm_joints",
    "motion_group_from_mujoco",
    "vector_space_from_mujoco",
]

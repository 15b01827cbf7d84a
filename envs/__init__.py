"""
Environments for the Tower of Hanoi.
"""

from envs.hanoi_env import HanoiEnv, default_sparse_reward

__all__ = ["HanoiEnv", "default_sparse_reward"]

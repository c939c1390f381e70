"""Scripted paddle policies for headless play."""

from autoplay.policies.random import policy_random
from autoplay.policies.follow import policy_follow

__all__ = ["policy_random", "policy_follow"]

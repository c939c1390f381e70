# src/autoplay/run.py
from __future__ import annotations
import argparse
import csv
import os
from typing import List, Optional, Tuple

from autoplay.env import CatcherEnv
from autoplay.policies import policy_random, policy_follow

POLICIES = {
    "random": policy_random,
    "follow": policy_follow,
}


# --------------------------
# Episode loop
# --------------------------
def run_episode(env: CatcherEnv, policy: str, seed: Optional[int] = None) -> Tuple[int, int, int]:
    """
    Play one round headless with a scripted policy.

    Returns:
        steps: ticks played
        catches: blocks caught
        mistakes: blocks missed (== threshold if the round ended in game over)
    """
    try:
        choose = POLICIES[policy]
    except KeyError:
        raise ValueError(f"Unknown policy: {policy}") from None

    obs = env.reset(seed)

    while True:
        a = choose(obs, env)
        obs, _r, done, info = env.step(a)
        if done or info.get("truncated"):
            break

    return info["steps"], info["catches"], info["mistakes"]


def run_episodes(env: CatcherEnv, policy: str, episodes: int, seed: int = 0) -> List[Tuple[int, int, int, int]]:
    rows = []
    for ep in range(1, episodes + 1):
        steps, catches, mistakes = run_episode(env, policy, seed + ep - 1)
        print(f"{ep},{steps},{catches},{mistakes}")
        rows.append((ep, steps, catches, mistakes))
    return rows


# --------------------------
# Main
# --------------------------
def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--episodes", type=int, default=10)
    parser.add_argument(
        "--policy",
        type=str,
        default="follow",
        choices=sorted(POLICIES),
        help="Which scripted policy moves the paddle",
    )
    parser.add_argument("--seed", type=int, default=0,
                        help="seed of the first episode; each later episode adds 1")
    parser.add_argument("--max-steps", type=int, default=10_000,
                        help="cut an episode off after this many ticks")
    parser.add_argument(
        "--outdir",
        type=str,
        default="data/runs",
        help="CSV will be saved here",
    )
    args = parser.parse_args(argv)

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, f"autoplay_{args.policy}.csv")

    env = CatcherEnv(seed_value=args.seed, max_steps=args.max_steps)

    print(f"Running {args.episodes} episode(s) with policy={args.policy} seed={args.seed}")
    print("ep,steps,catches,mistakes")
    rows = [("ep", "steps", "catches", "mistakes")]
    rows.extend(run_episodes(env, args.policy, args.episodes, args.seed))

    with open(out_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)

    print(f"\nSaved results → {out_csv}")
    return out_csv


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Report observed treap height over many random insertion orders."""

from __future__ import annotations

import argparse

from treapset.bench.height import measure_height
from treapset.utils.config import load_config
from treapset.utils.seeding import seed_everything


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Measure treap height statistics")
    parser.add_argument("--config", default="configs/default.yaml", help="Base config")
    parser.add_argument("--balancer", default=None, help="Balancer config override")
    parser.add_argument("--keys", type=int, default=None, help="Keys per tree")
    parser.add_argument("--trials", type=int, default=None, help="Number of trees to build")
    parser.add_argument(
        "--set", action="append", default=[], dest="overrides", metavar="KEY=VALUE"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    config = load_config(
        default_path=args.config,
        balancer_path=args.balancer,
        overrides=args.overrides,
    )
    height_cfg = config["height"]
    n_keys = args.keys if args.keys is not None else height_cfg["n_keys"]
    trials = args.trials if args.trials is not None else height_cfg["trials"]

    seed_everything(config["seed"])
    stats = measure_height(
        n_keys,
        trials=trials,
        seed=config["seed"],
        balancer=config["treap"]["balancer"],
    )

    print(f"Balancer: {config['treap']['balancer']}  keys={n_keys}  trials={trials}")
    print(
        f"height mean={stats['height_mean']:.2f} std={stats['height_std']:.2f} "
        f"max={stats['height_max']:.0f} ratio={stats['height_ratio']:.2f} x log2(n)"
    )


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Benchmark entry point: replay a workload against a treap."""

from __future__ import annotations

import argparse

from treapset.bench.runner import run_benchmark
from treapset.utils.config import load_config
from treapset.utils.logging import ExperimentLogger
from treapset.utils.seeding import seed_everything


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Benchmark treap insert/erase throughput",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
examples:
  python scripts/bench.py
  python scripts/bench.py --balancer configs/balancers/split_merge.yaml
  python scripts/bench.py --workload configs/workloads/churn.yaml --set benchmark.validate_freq=1000
  python scripts/bench.py --set workload.n_ops=500000 --set mlflow.enabled=true
""",
    )
    parser.add_argument(
        "--config",
        default="configs/default.yaml",
        help="Path to base config (default: configs/default.yaml)",
    )
    parser.add_argument("--balancer", default=None, help="Path to balancer config override")
    parser.add_argument("--workload", default=None, help="Path to workload config override")
    parser.add_argument(
        "--set",
        action="append",
        default=[],
        dest="overrides",
        metavar="KEY=VALUE",
        help="Override config values (e.g. --set workload.n_ops=500000)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    config = load_config(
        default_path=args.config,
        balancer_path=args.balancer,
        workload_path=args.workload,
        overrides=args.overrides,
    )

    seed_everything(config["seed"])
    print(f"Balancer: {config['treap']['balancer']}")
    print(f"Workload: {config['workload']['kind']} x {config['workload']['n_ops']}")

    logger = ExperimentLogger.from_config(config, run_name=config["treap"]["balancer"])
    try:
        summary = run_benchmark(config, logger=logger)
    finally:
        if logger is not None:
            logger.end()

    for key, value in summary.items():
        print(f"{key:>10}: {value:,.2f}")


if __name__ == "__main__":
    main()

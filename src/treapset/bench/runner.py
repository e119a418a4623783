"""Timed replay of a workload against a treap."""

from __future__ import annotations

import time

from tqdm import tqdm

from treapset.bench.workload import make_workload_from_config
from treapset.core.invariants import check_invariants
from treapset.core.treap import Treap
from treapset.utils.logging import ExperimentLogger


def run_benchmark(config: dict, logger: ExperimentLogger | None = None) -> dict[str, float]:
    """Replay the configured workload and return summary stats.

    Invariants are re-checked every ``benchmark.validate_freq`` ops
    (0 disables) and, when a *logger* is given, tree size, height and
    throughput are logged every ``benchmark.log_freq`` ops.

    Returns:
        Dict with ``ops``, ``inserted``, ``erased``, ``len``, ``height``,
        ``elapsed_s`` and ``ops_per_s``.
    """
    treap_cfg = config["treap"]
    bench_cfg = config.get("benchmark", {})
    validate_freq = bench_cfg.get("validate_freq", 0)
    log_freq = bench_cfg.get("log_freq", 0)

    treap = Treap(treap_cfg["seed"], balancer=treap_cfg.get("balancer", "rotation"))
    workload = make_workload_from_config(config)

    if logger is not None:
        logger.log_params(config)

    inserted = 0
    erased = 0
    start = time.perf_counter()

    pbar = tqdm(
        zip(workload.keys, workload.erase.tolist()),
        total=len(workload),
        desc=f"Benchmark [{treap.balancer}]",
        disable=not bench_cfg.get("progress", True),
    )
    for step, (key, is_erase) in enumerate(pbar, start=1):
        if is_erase:
            erased += treap.erase(key)
        else:
            inserted += treap.insert(key)

        if validate_freq and step % validate_freq == 0:
            check_invariants(treap)

        if logger is not None and log_freq and step % log_freq == 0:
            elapsed = time.perf_counter() - start
            logger.log_metrics(
                {
                    "treap/len": float(len(treap)),
                    "treap/height": float(treap.height()),
                    "bench/ops_per_s": step / elapsed if elapsed > 0 else 0.0,
                },
                step=step,
            )
            pbar.set_postfix(len=len(treap))

    elapsed = time.perf_counter() - start
    summary = {
        "ops": float(len(workload)),
        "inserted": float(inserted),
        "erased": float(erased),
        "len": float(len(treap)),
        "height": float(treap.height()),
        "elapsed_s": elapsed,
        "ops_per_s": len(workload) / elapsed if elapsed > 0 else 0.0,
    }

    if logger is not None:
        logger.log_metrics({f"summary/{k}": v for k, v in summary.items()})
    return summary

"""Tests for the benchmark runner."""

from __future__ import annotations

import pytest

from treapset.bench.runner import run_benchmark
from treapset.core.errors import InvariantError
from treapset.utils.config import apply_overrides


def _config(balancer: str = "rotation", **workload: object) -> dict:
    wl = {"kind": "random", "n_ops": 2000, "erase_every": 3, "key_space": 300, "seed": 4}
    wl.update(workload)
    return {
        "seed": 4,
        "treap": {"seed": 71, "balancer": balancer},
        "workload": wl,
        "benchmark": {"validate_freq": 100, "log_freq": 500, "progress": False},
    }


class _RecordingLogger:
    def __init__(self) -> None:
        self.params: list[dict] = []
        self.metrics: list[tuple[dict, int | None]] = []

    def log_params(self, params: dict) -> None:
        self.params.append(params)

    def log_metrics(self, metrics: dict, step: int | None = None) -> None:
        self.metrics.append((metrics, step))


def test_summary_is_consistent(balancer: str) -> None:
    summary = run_benchmark(_config(balancer))
    assert summary["ops"] == 2000
    assert summary["len"] == summary["inserted"] - summary["erased"]
    assert 0 < summary["len"] <= 300
    assert summary["height"] >= 1
    assert summary["ops_per_s"] > 0


def test_balancers_produce_same_contents() -> None:
    a = run_benchmark(_config("rotation"))
    b = run_benchmark(_config("split_merge"))
    for key in ("inserted", "erased", "len"):
        assert a[key] == b[key]


def test_ascending_workload_inserts_everything() -> None:
    summary = run_benchmark(_config(kind="ascending", n_ops=1000))
    assert summary["inserted"] == 1000
    assert summary["erased"] == 0
    assert summary["len"] == 1000


def test_logger_receives_params_and_metrics() -> None:
    logger = _RecordingLogger()
    run_benchmark(_config(), logger=logger)  # type: ignore[arg-type]
    assert logger.params[0]["treap"]["balancer"] == "rotation"
    steps = [step for _, step in logger.metrics if step is not None]
    assert steps == [500, 1000, 1500, 2000]
    periodic, _ = logger.metrics[0]
    assert set(periodic) == {"treap/len", "treap/height", "bench/ops_per_s"}
    summary, step = logger.metrics[-1]
    assert step is None
    assert "summary/len" in summary


def test_validation_surfaces_corruption(monkeypatch: pytest.MonkeyPatch) -> None:
    def _broken(tree: object) -> int:
        raise InvariantError("count: corrupted")

    monkeypatch.setattr("treapset.bench.runner.check_invariants", _broken)
    with pytest.raises(InvariantError):
        run_benchmark(_config())


def test_default_config_runs(default_config: dict) -> None:
    config = apply_overrides(
        default_config,
        ["workload.n_ops=500", "benchmark.progress=false", "benchmark.validate_freq=50"],
    )
    summary = run_benchmark(config)
    assert summary["ops"] == 500
    assert summary["len"] == summary["inserted"] - summary["erased"]

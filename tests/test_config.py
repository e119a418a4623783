"""Tests for the YAML config system."""

from __future__ import annotations

from pathlib import Path

import pytest

from treapset.utils.config import (
    apply_overrides,
    deep_merge,
    load_config,
    load_yaml,
    validate_config,
)


def test_load_default_config(configs_dir: Path) -> None:
    config = load_yaml(configs_dir / "default.yaml")
    assert "treap" in config
    assert "workload" in config
    assert "benchmark" in config
    assert "mlflow" in config
    assert config["treap"]["balancer"] == "rotation"
    assert config["workload"]["key_space"] is None


def test_deep_merge_overrides_leaf() -> None:
    base = {"a": 1, "b": {"c": 2, "d": 3}}
    override = {"b": {"c": 99}}
    result = deep_merge(base, override)
    assert result["a"] == 1
    assert result["b"]["c"] == 99
    assert result["b"]["d"] == 3


def test_deep_merge_does_not_mutate_base() -> None:
    base = {"b": {"c": 2}}
    deep_merge(base, {"b": {"c": 3}})
    assert base["b"]["c"] == 2


def test_apply_overrides() -> None:
    config = {"treap": {"seed": 1}, "workload": {"key_space": 10}}
    apply_overrides(config, ["treap.seed=71", "workload.key_space=null"])
    assert config["treap"]["seed"] == 71
    assert config["workload"]["key_space"] is None


def test_apply_overrides_creates_nested() -> None:
    config: dict = {}
    apply_overrides(config, ["a.b.c=hello"])
    assert config["a"]["b"]["c"] == "hello"


def test_apply_overrides_rejects_missing_equals() -> None:
    with pytest.raises(ValueError, match="key=value"):
        apply_overrides({}, ["treap.seed"])


def test_load_config_with_balancer_override(configs_dir: Path) -> None:
    config = load_config(
        default_path=configs_dir / "default.yaml",
        balancer_path=configs_dir / "balancers" / "split_merge.yaml",
    )
    assert config["treap"]["balancer"] == "split_merge"
    # Other defaults should be preserved
    assert config["treap"]["seed"] == 1234


def test_load_config_with_workload_override(configs_dir: Path) -> None:
    config = load_config(
        default_path=configs_dir / "default.yaml",
        workload_path=configs_dir / "workloads" / "churn.yaml",
    )
    assert config["workload"]["key_space"] == 5000
    assert config["workload"]["erase_every"] == 2
    assert config["benchmark"]["log_freq"] == 10000


def test_load_config_with_cli_overrides(configs_dir: Path) -> None:
    config = load_config(
        default_path=configs_dir / "default.yaml",
        workload_path=configs_dir / "workloads" / "ascending.yaml",
        overrides=["seed=99", "workload.n_ops=1000"],
    )
    assert config["seed"] == 99
    assert config["workload"]["kind"] == "ascending"
    assert config["workload"]["n_ops"] == 1000


def test_validate_rejects_unknown_balancer(configs_dir: Path) -> None:
    with pytest.raises(ValueError, match="Unknown treap.balancer 'avl'"):
        load_config(
            default_path=configs_dir / "default.yaml",
            overrides=["treap.balancer=avl"],
        )


def test_validate_rejects_unknown_workload_kind(configs_dir: Path) -> None:
    with pytest.raises(ValueError, match="workload.kind"):
        load_config(
            default_path=configs_dir / "default.yaml",
            overrides=["workload.kind=zipf"],
        )


@pytest.mark.parametrize("seed", ["abc", "1.5", "true", "null"])
def test_validate_rejects_non_int_seed(configs_dir: Path, seed: str) -> None:
    with pytest.raises(ValueError, match="treap.seed"):
        load_config(
            default_path=configs_dir / "default.yaml",
            overrides=[f"treap.seed={seed}"],
        )


def test_validate_rejects_negative_n_ops() -> None:
    config = {"treap": {"seed": 1}, "workload": {"n_ops": -5}}
    with pytest.raises(ValueError, match="n_ops"):
        validate_config(config)


def test_validate_requires_sections() -> None:
    with pytest.raises(ValueError, match="'workload' section"):
        validate_config({"treap": {"seed": 1}})


def test_validate_returns_config_unchanged(default_config: dict) -> None:
    assert validate_config(default_config) is default_config

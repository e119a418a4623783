"""Benchmark config: YAML layers, CLI overrides and section checks.

A config is built from ``configs/default.yaml``, optionally a balancer
layer (``configs/balancers/*.yaml``) and a workload layer
(``configs/workloads/*.yaml``), then ``--set`` overrides.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from treapset.balancing import available_balancers

_REQUIRED_SECTIONS = ("treap", "workload")
_WORKLOAD_KINDS = ("ascending", "random")


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML file and return its contents as a dict."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (returns a new dict)."""
    merged = base.copy()
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def apply_overrides(config: dict, overrides: list[str]) -> dict:
    """Apply dot-notation overrides like ``treap.balancer=split_merge``.

    Values are parsed as YAML scalars, so ``workload.key_space=null``
    selects the full 64-bit key range and ``treap.seed=71`` is an int.
    """
    for override in overrides:
        if "=" not in override:
            raise ValueError(f"Override must be key=value, got: {override!r}")
        key_path, raw_value = override.split("=", 1)
        keys = key_path.split(".")
        node = config
        for k in keys[:-1]:
            node = node.setdefault(k, {})
        node[keys[-1]] = yaml.safe_load(raw_value)
    return config


def validate_config(config: dict) -> dict:
    """Check the sections the benchmark and height report read.

    Raises ``ValueError`` naming the first bad entry; returns *config*
    unchanged otherwise.
    """
    for section in _REQUIRED_SECTIONS:
        if not isinstance(config.get(section), dict):
            raise ValueError(f"Config is missing the '{section}' section")

    treap_cfg = config["treap"]
    seed = treap_cfg.get("seed")
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise ValueError(f"treap.seed must be an int, got {seed!r}")
    balancer = treap_cfg.get("balancer", "rotation")
    if balancer not in available_balancers():
        available = ", ".join(available_balancers())
        raise ValueError(f"Unknown treap.balancer '{balancer}'. Available: {available}")

    workload_cfg = config["workload"]
    kind = workload_cfg.get("kind", "random")
    if kind not in _WORKLOAD_KINDS:
        raise ValueError(f"Unknown workload.kind '{kind}'. Available: {', '.join(_WORKLOAD_KINDS)}")
    if not isinstance(workload_cfg.get("n_ops"), int) or workload_cfg["n_ops"] < 0:
        raise ValueError(f"workload.n_ops must be a non-negative int, got {workload_cfg.get('n_ops')!r}")
    return config


def load_config(
    default_path: str | Path = "configs/default.yaml",
    balancer_path: str | Path | None = None,
    workload_path: str | Path | None = None,
    overrides: list[str] | None = None,
) -> dict[str, Any]:
    """Merge default → balancer → workload → overrides, then validate."""
    config = load_yaml(default_path)
    for layer in (balancer_path, workload_path):
        if layer:
            config = deep_merge(config, load_yaml(layer))
    if overrides:
        config = apply_overrides(config, overrides)
    return validate_config(config)

"""MLFlow logger for benchmark runs."""

from __future__ import annotations

from typing import Any

import mlflow


class ExperimentLogger:
    """Thin wrapper around MLFlow for tracking benchmark runs."""

    def __init__(
        self,
        experiment_name: str,
        tracking_uri: str = "mlruns",
        run_name: str | None = None,
    ):
        mlflow.set_tracking_uri(tracking_uri)
        mlflow.set_experiment(experiment_name)
        self.run = mlflow.start_run(run_name=run_name)

    @classmethod
    def from_config(cls, config: dict, run_name: str | None = None) -> ExperimentLogger | None:
        """Build a logger from the ``mlflow`` section, or None when disabled."""
        cfg = config.get("mlflow", {})
        if not cfg.get("enabled", False):
            return None
        return cls(
            experiment_name=cfg["experiment_name"],
            tracking_uri=cfg.get("tracking_uri", "mlruns"),
            run_name=run_name,
        )

    def log_params(self, params: dict[str, Any], prefix: str = "") -> None:
        """Log a (possibly nested) dict of parameters."""
        flat = self._flatten(params, prefix)
        # MLFlow has a 100-param batch limit
        items = list(flat.items())
        for i in range(0, len(items), 100):
            mlflow.log_params(dict(items[i : i + 100]))

    def log_metrics(self, metrics: dict[str, float], step: int | None = None) -> None:
        mlflow.log_metrics(metrics, step=step)

    def end(self) -> None:
        mlflow.end_run()

    @staticmethod
    def _flatten(d: dict, prefix: str = "") -> dict[str, str]:
        """Flatten a nested dict into dot-separated keys with string values."""
        items: dict[str, str] = {}
        for k, v in d.items():
            key = f"{prefix}.{k}" if prefix else k
            if isinstance(v, dict):
                items.update(ExperimentLogger._flatten(v, key))
            else:
                items[key] = str(v)
        return items

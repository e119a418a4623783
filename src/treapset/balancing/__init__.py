"""Balancer registry — register and create balancing strategies by name."""

from __future__ import annotations

from typing import Callable, Type

from treapset.balancing.base import BaseBalancer

_REGISTRY: dict[str, Type[BaseBalancer]] = {}


def register(name: str) -> Callable:
    """Decorator to register a balancer class under *name*."""

    def wrapper(cls: Type[BaseBalancer]) -> Type[BaseBalancer]:
        if name in _REGISTRY:
            raise ValueError(f"Balancer '{name}' is already registered")
        cls.name = name
        _REGISTRY[name] = cls
        return cls

    return wrapper


def create_balancer(name: str) -> BaseBalancer:
    """Instantiate a registered balancer by name."""
    if name not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY)) or "(none)"
        raise ValueError(f"Unknown balancer '{name}'. Available: {available}")
    return _REGISTRY[name]()


def available_balancers() -> list[str]:
    """Return sorted list of registered balancer names."""
    return sorted(_REGISTRY)


# Import strategy modules so their @register decorators run.
from treapset.balancing import rotation, split_merge  # noqa: E402,F401

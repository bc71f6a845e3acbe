"""Service registry.
Maps a provider name from configuration to the callable that builds it.
"""
from __future__ import annotations
from typing import Dict, Callable, Any


class Registry:
    def __init__(self, kind: str = "service") -> None:
        self.kind = kind
        self._factories: Dict[str, Callable[..., Any]] = {}

    def register(self, name: str, factory: Callable[..., Any]) -> None:
        key = name.strip().lower()
        if key in self._factories:
            raise ValueError(f"A {self.kind} named '{key}' is already registered")
        self._factories[key] = factory

    def create(self, name: str, **kwargs: Any) -> Any:
        """Build the named provider, passing `kwargs` to its factory."""
        factory = self._factories.get(name.strip().lower())
        if factory is None:
            known = ", ".join(sorted(self._factories)) or "none"
            raise KeyError(f"Unknown {self.kind} '{name}' (available: {known})")
        return factory(**kwargs)


TRANSLATION_REGISTRY = Registry("translation provider")

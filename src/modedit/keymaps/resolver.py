"""Per-mode key table resolution with telemetry instrumentation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Optional

from modedit.actions import Mode
from modedit.runtime.telemetry import span

from .models import Binding
from .registry import KeymapRegistry


@dataclass(slots=True)
class KeyTable:
    """Flat ``token -> Binding`` table built for a given mode."""

    mode: Mode
    entries: Dict[str, Binding] = field(default_factory=dict)

    def add_binding(self, binding: Binding) -> None:
        self.entries[binding.key_signature] = binding


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome returned from the resolver."""

    status: Literal["match", "miss"]
    binding: Optional[Binding] = None


class KeymapResolver:
    """Builds mode-specific tables and resolves key tokens against them."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._cache: Dict[Mode, tuple[int, KeyTable]] = {}

    @property
    def registry(self) -> KeymapRegistry:
        return self._registry

    def resolve(self, mode: Mode, token: str) -> ResolutionResult:
        mode = Mode(mode)
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode.value, "token": token},
        ) as handle:
            binding = self._ensure_table(mode).entries.get(token)
            if binding is None:
                handle.add_metadata("status", "miss")
                return ResolutionResult(status="miss")
            handle.add_metadata("status", "match")
            handle.add_metadata("binding_id", binding.id)
            return ResolutionResult(status="match", binding=binding)

    def reset(self, mode: Optional[Mode] = None) -> None:
        if mode is None:
            self._cache.clear()
        else:
            self._cache.pop(Mode(mode), None)

    def _ensure_table(self, mode: Mode) -> KeyTable:
        revision = self._registry.revision()
        cached = self._cache.get(mode)
        if cached and cached[0] == revision:
            return cached[1]

        table = KeyTable(mode=mode)
        for binding in self._registry.iter_bindings(mode):
            table.add_binding(binding)
        self._cache[mode] = (revision, table)
        return table


__all__ = [
    "KeymapResolver",
    "KeyTable",
    "ResolutionResult",
]

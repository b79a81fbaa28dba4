# src/atlas_config/core/config/trace.py
"""
Log estruturado de uma resolução de configuração.

O `ResolutionLog` acumula eventos estruturados (dicionários) emitidos
pelo pipeline durante uma resolução: uma camada mesclada, o overlay
selecionado ou ausente, e a configuração final com seu hash.

Princípios fundamentais:
    - Logs são eventos estruturados, não texto livre
    - O log pertence ao chamador; o motor não mantém log global
    - Eventos abaixo do nível mínimo são descartados na emissão

Invariantes:
    - Todo evento possui `timestamp`, `level`, `event` e `message`
    - A ordem de inserção é preservada
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from .constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_VARIABLE

LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


def _normalize_level(level: str) -> str:
    normalized = (level or "").upper()
    if normalized == "WARNING":
        normalized = "WARN"
    if normalized not in LEVELS:
        raise ValueError(f"Nível de log inválido: {level!r} (esperado um de {LEVELS})")
    return normalized


@dataclass
class ResolutionLog:
    """
    Buffer de eventos estruturados de uma resolução.

    Campos:
    - min_level: nível mínimo registrado (DEBUG < INFO < WARN < ERROR)
    - events: eventos registrados, em ordem de emissão
    """

    min_level: str = DEFAULT_LOG_LEVEL
    events: List[Dict[str, Any]] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.min_level = _normalize_level(self.min_level)

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "ResolutionLog":
        """
        Cria o log com o nível mínimo lido de `LOG_LEVEL`.

        Valores ausentes ou desconhecidos caem para `DEFAULT_LOG_LEVEL`;
        apenas o construtor explícito rejeita níveis inválidos.
        """
        source = os.environ if environ is None else environ
        level = source.get(LOG_LEVEL_VARIABLE) or DEFAULT_LOG_LEVEL
        try:
            return cls(min_level=level)
        except ValueError:
            return cls(min_level=DEFAULT_LOG_LEVEL)

    def should_log(self, level: str) -> bool:
        return LEVELS.index(_normalize_level(level)) >= LEVELS.index(self.min_level)

    # -----------------------------
    # Logging
    # -----------------------------
    def log(self, *, level: str, event: str, message: str, **extra: Any) -> None:
        if not self.should_log(level):
            return
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": _normalize_level(level),
            "event": event,
            "message": message,
        }
        entry.update(extra)
        self.events.append(entry)

    def debug(self, event: str, message: str, **extra: Any) -> None:
        self.log(level="DEBUG", event=event, message=message, **extra)

    def info(self, event: str, message: str, **extra: Any) -> None:
        self.log(level="INFO", event=event, message=message, **extra)

    def warn(self, event: str, message: str, **extra: Any) -> None:
        self.log(level="WARN", event=event, message=message, **extra)

    def error(self, event: str, message: str, **extra: Any) -> None:
        self.log(level="ERROR", event=event, message=message, **extra)

    # -----------------------------
    # Inspeção
    # -----------------------------
    def get_events(self, event: Optional[str] = None) -> List[Dict[str, Any]]:
        if event is None:
            return list(self.events)
        return [entry for entry in self.events if entry["event"] == event]

    def clear(self) -> None:
        self.events = []

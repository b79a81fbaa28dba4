# src/atlas_config/core/config/defaults.py
"""
Padrões embutidos do framework de testes e camada de autodetecção.

Este módulo fornece as duas camadas que o framework contribui para a
resolução, além da fábrica `create_config`, ponto de entrada usado por
consumidores que só querem informar seus overrides.

Camadas contribuídas:
    - defaults     → `framework_defaults()`, configuração base estável
    - autodetected → `detect_environment()`, fatos do ambiente de execução

Decisões arquiteturais:
    - O ambiente do processo é lido uma única vez, em `create_config`,
      e repassado como snapshot às funções que dele dependem
    - `framework_defaults` não depende do ambiente; diferenças de CI
      vivem exclusivamente na camada de autodetecção

Limites explícitos:
    - Não executa testes nem inicializa navegadores
    - Não valida a configuração resolvida
"""

from __future__ import annotations

import os
from copy import deepcopy
from typing import Any, Dict, Mapping, Optional

from .constants import CI_VARIABLE
from .pipeline import resolve
from .selector import resolve_active_name
from .trace import ResolutionLog

_FALSY = {"", "0", "false", "no", "off"}

_DEVICES: Dict[str, Dict[str, Any]] = {
    "Desktop Chrome": {
        "browser_name": "chromium",
        "viewport": {"width": 1280, "height": 720},
        "device_scale_factor": 1,
        "is_mobile": False,
        "has_touch": False,
    },
    "Desktop Firefox": {
        "browser_name": "firefox",
        "viewport": {"width": 1280, "height": 720},
        "device_scale_factor": 1,
        "is_mobile": False,
        "has_touch": False,
    },
}

_FRAMEWORK_DEFAULTS: Dict[str, Any] = {
    "test_dir": "./tests",
    "timeout": 30 * 1000,
    "expect": {"timeout": 5000},
    "fully_parallel": True,
    "forbid_only": False,
    "retries": 2,
    "workers": None,
    "reporter": "html",
    "use": {
        "action_timeout": 30 * 1000,
        "base_url": "http://localhost:3000",
        "trace": "on-first-retry",
        "screenshot": "only-on-failure",
        "video": "off",
    },
    "projects": [
        {"name": "chromium", "use": _DEVICES["Desktop Chrome"]},
        {"name": "firefox", "use": _DEVICES["Desktop Firefox"]},
    ],
}


def device(name: str) -> Dict[str, Any]:
    """Retorna uma cópia do descritor de dispositivo registrado com `name`."""
    if name not in _DEVICES:
        raise KeyError(name)
    return deepcopy(_DEVICES[name])


def framework_defaults() -> Dict[str, Any]:
    """Retorna uma cópia nova dos padrões embutidos do framework."""
    return deepcopy(_FRAMEWORK_DEFAULTS)


def _is_truthy(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() not in _FALSY


def detect_environment(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Camada de autodetecção do framework.

    Vazia por padrão. Em integração contínua (`CI` verdadeiro), proíbe
    `.only` acidentais e força execução com um único worker.
    """
    source = os.environ if environ is None else environ
    if _is_truthy(source.get(CI_VARIABLE)):
        return {"forbid_only": True, "workers": 1}
    return {}


def create_config(
    overrides: Any = None,
    *,
    active_name: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    log: Optional[ResolutionLog] = None,
) -> Any:
    """
    Resolve a configuração do framework a partir dos overrides do consumidor.

    O ambiente do processo é capturado uma única vez nesta fronteira; o
    nome do ambiente ativo e a camada de autodetecção derivam do mesmo
    snapshot, e `resolve` recebe apenas valores explícitos.

    Args:
        overrides (Any): Override do consumidor, com `environments` opcional.
        active_name (Optional[str]): Ambiente ativo explícito; quando
            ausente, `TEST_ENV` é consultado.
        environ (Optional[Mapping[str, str]]): Snapshot do ambiente a usar
            no lugar de `os.environ`.
        log (Optional[ResolutionLog]): Destino opcional de eventos.

    Returns:
        Any: Configuração resolvida.
    """
    snapshot = dict(os.environ if environ is None else environ)

    return resolve(
        framework_defaults(),
        detect_environment(snapshot),
        overrides,
        resolve_active_name(active_name, snapshot),
        log=log,
    )

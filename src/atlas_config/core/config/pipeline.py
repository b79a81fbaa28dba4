# src/atlas_config/core/config/pipeline.py
"""
Pipeline canônico de resolução de configuração.

Este módulo orquestra a ordem fixa de merge entre as camadas de uma
resolução e entrega a configuração projetada ao chamador.

Ordem de precedência (crescente):
    1. defaults      → padrões embutidos
    2. autodetected  → fatos detectados do ambiente de execução
    3. override      → configuração explícita do chamador
    4. overlay       → camada do ambiente ativo, selecionada por nome

O overlay sempre vence por último; o override vence a autodetecção,
de forma que configurações explícitas nunca são silenciosamente
sobrescritas por fatos detectados.

Princípios fundamentais:
    - `resolve` é uma função pura: não lê o ambiente do processo,
      não mantém estado e não muta seus inputs
    - O nome do ambiente ativo é recebido como parâmetro explícito
    - O mapa de overlays é validado antes de qualquer merge

Invariantes:
    - Sem overrides, o resultado é `project(defaults)`
    - Um nome sem overlay correspondente não altera o resultado
    - Uma sequência no overlay substitui qualquer sequência anterior,
      em qualquer profundidade
    - O resultado nunca contém a meta-chave `environments`

Limites explícitos:
    - Não carrega arquivos (ver `loader`)
    - Não detecta o ambiente (ver `defaults.detect_environment`)
"""

from __future__ import annotations

from typing import Any, Optional

from .constants import (
    ENVIRONMENTS_KEY,
    LAYER_AUTODETECTED,
    LAYER_DEFAULTS,
    LAYER_OVERLAY,
    LAYER_OVERRIDE,
)
from .hashing import compute_config_hash
from .layers import LayerStore
from .merge import merge
from .projector import project, validate_overlay_map
from .selector import select_overlay
from .trace import ResolutionLog
from .tree import is_mapping, kind_of


def build_layer_store(
    defaults: Any,
    autodetected: Any = None,
    override: Any = None,
    active_name: Optional[str] = None,
    *,
    log: Optional[ResolutionLog] = None,
) -> LayerStore:
    """
    Monta o `LayerStore` de uma resolução na ordem canônica de precedência.

    Camadas ausentes (`None`) são tratadas como `{}`. O overlay é
    selecionado a partir da meta-chave `environments` do override.

    Raises:
        ProjectionError: Se o mapa de overlays do override for malformado.
    """
    override = {} if override is None else override

    overlays = override.get(ENVIRONMENTS_KEY) if is_mapping(override) else None
    if overlays is not None:
        validate_overlay_map(overlays)

    overlay = select_overlay(overlays, active_name)

    if log is not None:
        if active_name and overlays is not None and active_name in overlays:
            log.info(
                "overlay.selected",
                f"Overlay do ambiente '{active_name}' selecionado",
                active_name=active_name,
            )
        elif active_name:
            log.debug(
                "overlay.missing",
                f"Nenhum overlay para o ambiente '{active_name}'; seguindo sem overlay",
                active_name=active_name,
                available=sorted(overlays) if overlays is not None else [],
            )

    store = LayerStore()
    store.add(LAYER_DEFAULTS, defaults)
    store.add(LAYER_AUTODETECTED, autodetected)
    store.add(LAYER_OVERRIDE, override)
    store.add(LAYER_OVERLAY, overlay)
    return store


def resolve_layers(store: LayerStore, *, log: Optional[ResolutionLog] = None) -> Any:
    """
    Mescla as camadas de `store` em ordem e projeta o resultado.

    Cada camada do store vence o acumulado das anteriores.
    """
    acc: Any = {}

    for rank, layer in enumerate(store):
        acc = merge(acc, layer.tree)
        if log is not None:
            log.debug(
                "layer.merged",
                f"Camada '{layer.name}' aplicada",
                layer=layer.name,
                rank=rank,
                kind=kind_of(layer.tree).value,
            )

    resolved = project(acc)

    if log is not None and log.should_log("INFO"):
        log.info(
            "config.resolved",
            "Configuração resolvida",
            layers=store.names(),
            config_hash=compute_config_hash(resolved),
        )

    return resolved


def resolve(
    defaults: Any,
    autodetected: Any = None,
    override: Any = None,
    active_name: Optional[str] = None,
    *,
    log: Optional[ResolutionLog] = None,
) -> Any:
    """
    Resolve a configuração efetiva a partir das quatro camadas canônicas.

    Algoritmo:
        acc = defaults
        acc = merge(acc, autodetected)
        acc = merge(acc, override)
        acc = merge(acc, select_overlay(override["environments"], active_name))
        return project(acc)

    Args:
        defaults (Any): Padrões embutidos.
        autodetected (Any): Camada de autodetecção do framework.
        override (Any): Override do chamador, opcionalmente com a
            meta-chave `environments` (mapa ambiente → camada).
        active_name (Optional[str]): Ambiente ativo, já resolvido pelo
            chamador (ver `resolve_active_name`).
        log (Optional[ResolutionLog]): Destino opcional de eventos.

    Returns:
        Any: Configuração resolvida, pertencente exclusivamente ao chamador.

    Raises:
        ProjectionError: Se a meta-chave `environments` for malformada.
    """
    store = build_layer_store(defaults, autodetected, override, active_name, log=log)
    return resolve_layers(store, log=log)

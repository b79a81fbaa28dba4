# src/atlas_config/core/config/tree.py
"""
Tipos canônicos de árvore de configuração.

Uma `ConfigTree` é definida recursivamente como:
    - escalar   → str, int, float, bool ou None
    - sequência → list/tuple de ConfigTree (unidade atômica no merge)
    - mapa      → dict de chave str para ConfigTree

A árvore continua sendo representada por valores Python puros; o tipo
de cada nó é tornado explícito por `NodeKind`, de forma que o merge
despache sobre um conjunto fechado de variantes.

Invariantes:
    - str e bytes são sempre escalares, nunca sequências
    - Objetos de tipo desconhecido são tratados como escalares opacos
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Dict, List, Union

Scalar = Union[str, int, float, bool, None]
ConfigTree = Union[Scalar, List[Any], Dict[str, Any]]


class NodeKind(str, Enum):
    """
    Variante de um nó de `ConfigTree`.

    Os valores são strings para facilitar serialização em eventos de log.
    """

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def kind_of(value: Any) -> NodeKind:
    """Classifica um valor na variante `NodeKind` correspondente."""
    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def is_mapping(value: Any) -> bool:
    return kind_of(value) is NodeKind.MAPPING


def is_empty_mapping(value: Any) -> bool:
    return is_mapping(value) and len(value) == 0

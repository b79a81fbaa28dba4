# src/atlas_config/core/config/hashing.py
"""
Hashing canônico de configuração do Atlas Config.

Gera o hash determinístico da configuração resolvida, usado como
identidade estrutural no evento `config.resolved` do ResolutionLog.

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - Algoritmo SHA-256

Invariantes:
    - Árvores estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres

Limites explícitos:
    - Não versiona nem compara configurações
    - Não persiste o hash
"""


import json
import hashlib
from typing import Any

from .tree import NodeKind, kind_of


def _normalize(value: Any) -> Any:
    kind = kind_of(value)
    if kind is NodeKind.MAPPING:
        return {str(key): _normalize(item) for key, item in value.items()}
    if kind is NodeKind.SEQUENCE:
        return [_normalize(item) for item in value]
    return value


def canonical_json(config: Any) -> str:
    """
    Serializa uma árvore de configuração em JSON canônico.

    Chaves de mapa são convertidas para str antes da ordenação e valores
    sem representação JSON nativa (ex.: `datetime.date` vindo de YAML)
    são serializados via `str`.
    """
    return json.dumps(
        _normalize(config),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )


def compute_config_hash(config: Any) -> str:
    """
    Gera um hash SHA-256 determinístico de uma árvore de configuração.

    Args:
        config (Any): Árvore resolvida (normalmente um dict).

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.
    """
    return hashlib.sha256(canonical_json(config).encode("utf-8")).hexdigest()

# src/atlas_config/core/config/merge.py
"""
Utilitário canônico de deep-merge de configuração.

Este módulo implementa a política oficial de merge utilizada pelo
Atlas Config para combinar duas árvores de configuração, onde a
segunda (`patch`) tem precedência sobre a primeira (`base`).

Política de merge (v1), avaliada por chave:
    - patch é sequência          → substituição total (sem merge posicional)
    - base e patch são mapas     → merge recursivo por chave
    - qualquer outro caso        → o valor do patch substitui o da base
      (escalares, None e mudanças de tipo, inclusive mapa ↔ sequência)
    - chaves ausentes no patch   → copiadas da base sem alteração

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
    - O despacho é um match fechado sobre `NodeKind`

Invariantes:
    - merge(x, {}) é igual a x para qualquer árvore x
    - O merge não é comutativo: o segundo argumento vence conflitos
    - A estrutura retornada nunca compartilha nós mutáveis com os inputs

Limites explícitos:
    - Não carrega arquivos de configuração
    - Não valida schema ou semântica de domínio
    - Não trata mudança de tipo como erro
"""

from copy import deepcopy
from typing import Any, Dict

from .tree import NodeKind, is_empty_mapping, kind_of


def merge(base: Any, patch: Any) -> Any:
    """
    Mescla `patch` sobre `base` e retorna uma nova árvore.

    Um mapa vazio na raiz do patch é a identidade do merge, inclusive
    quando `base` não é um mapa. Fora desse caso, a política por chave
    descrita no módulo se aplica também à raiz: um patch escalar ou
    sequência substitui integralmente a base.

    Args:
        base (Any): Árvore de menor precedência (ex.: defaults).
        patch (Any): Árvore de maior precedência (ex.: override).

    Returns:
        Any: Nova árvore resultante do merge.
    """
    if is_empty_mapping(patch):
        return deepcopy(base)
    return _merge_node(base, patch)


# Nome herdado dos chamadores do loader de arquivos.
deep_merge = merge


def merge_all(*trees: Any) -> Any:
    """Aplica `merge` da esquerda para a direita, partindo de `{}`."""
    result: Any = {}
    for tree in trees:
        result = merge(result, tree)
    return result


def _merge_node(base: Any, patch: Any) -> Any:
    patch_kind = kind_of(patch)

    if patch_kind is NodeKind.SEQUENCE:
        return deepcopy(patch)

    if patch_kind is NodeKind.MAPPING and kind_of(base) is NodeKind.MAPPING:
        return _merge_mappings(base, patch)

    # escalar, None ou mudança de tipo -> sobrescrita
    return deepcopy(patch)


def _merge_mappings(base: Any, patch: Any) -> Dict[str, Any]:
    result: Dict[str, Any] = {}

    for key, base_value in base.items():
        if key in patch:
            result[key] = _merge_node(base_value, patch[key])
        else:
            result[key] = deepcopy(base_value)

    for key, patch_value in patch.items():
        if key not in result:
            result[key] = deepcopy(patch_value)

    return result

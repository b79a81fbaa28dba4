# src/atlas_config/core/config/projector.py
"""
Projeção da configuração resolvida.

Remove da árvore acumulada as chaves que existem apenas durante a
resolução (o mapa de overlays por ambiente) antes que o resultado seja
entregue aos consumidores.

Invariantes:
    - Exatamente a meta-chave `environments` é removida
    - Todo o restante da árvore é preservado sem alteração
    - A meta-chave, quando presente, deve ser um mapa nome → camada (dict);
      qualquer outra forma levanta `ProjectionError`

Limites explícitos:
    - Não valida o conteúdo das camadas de overlay
    - Não remove chaves aninhadas com o mesmo nome
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from atlas_config.core.errors import projection_error

from .constants import ENVIRONMENTS_KEY
from .errors import ProjectionError
from .tree import is_mapping, kind_of


def validate_overlay_map(value: Any, *, key: str = ENVIRONMENTS_KEY) -> None:
    """
    Valida que `value` é um mapa de nome de ambiente para camada.

    Raises:
        ProjectionError: Se `value` não for um mapa, se alguma chave não
            for string ou se alguma camada não for um mapa.
    """
    if not is_mapping(value):
        message = (
            f"Meta-chave '{key}' deve ser um mapa ambiente -> camada, "
            f"recebido: {type(value).__name__}"
        )
        raise ProjectionError(
            message,
            payload=projection_error(
                message=message,
                key=key,
                actual_type=kind_of(value).value,
            ),
        )

    for name, layer in value.items():
        if not isinstance(name, str):
            message = f"Nome de ambiente em '{key}' deve ser str, recebido: {type(name).__name__}"
            raise ProjectionError(
                message,
                payload=projection_error(
                    message=message,
                    key=key,
                    actual_type=type(name).__name__,
                ),
            )
        if not is_mapping(layer):
            message = (
                f"Camada do ambiente '{name}' em '{key}' deve ser um mapa, "
                f"recebido: {type(layer).__name__}"
            )
            raise ProjectionError(
                message,
                payload=projection_error(
                    message=message,
                    key=key,
                    environment=name,
                    actual_type=kind_of(layer).value,
                ),
            )


def project(tree: Any) -> Any:
    """
    Remove a meta-chave de ambientes e retorna a configuração final.

    Uma raiz que não é mapa (substituição integral por um patch escalar
    ou sequência) não possui meta-chaves e é retornada como cópia.

    Raises:
        ProjectionError: Se a meta-chave estiver presente com forma inválida.
    """
    if not is_mapping(tree):
        return deepcopy(tree)

    if ENVIRONMENTS_KEY in tree:
        validate_overlay_map(tree[ENVIRONMENTS_KEY])

    return {key: deepcopy(value) for key, value in tree.items() if key != ENVIRONMENTS_KEY}

# src/atlas_config/core/config/selector.py
"""
Seleção do ambiente ativo e do overlay correspondente.

Este módulo resolve o nome do ambiente de implantação ativo e escolhe,
no mapa de overlays embutido no override, a camada correspondente.

Precedência do nome ativo:
    1. parâmetro explícito na chamada
    2. variável de ambiente do processo (`TEST_ENV` por padrão)
    3. ausente (None)

Apenas a primeira fonte não vazia é utilizada.

Invariantes:
    - A ausência de ambiente, ou de overlay correspondente, não é erro:
      o resultado é o mapa vazio (identidade do merge)
    - O seletor não mescla camadas
    - O ambiente do processo é lido uma única vez por chamada
"""

from __future__ import annotations

import os
from typing import Any, Mapping, Optional

from .constants import ENVIRONMENT_VARIABLE
from .tree import is_mapping


def resolve_active_name(
    explicit: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    variable: str = ENVIRONMENT_VARIABLE,
) -> Optional[str]:
    """
    Resolve o nome do ambiente ativo a partir das fontes disponíveis.

    Args:
        explicit (Optional[str]): Nome passado explicitamente pelo chamador.
        environ (Optional[Mapping[str, str]]): Snapshot do ambiente; quando
            omitido, `os.environ` é consultado uma única vez.
        variable (str): Nome da variável de ambiente consultada.

    Returns:
        Optional[str]: Nome do ambiente ativo, ou None quando ausente.
    """
    if explicit:
        return explicit

    source = os.environ if environ is None else environ
    value = source.get(variable)
    return value or None


def select_overlay(overlays: Optional[Mapping[str, Any]], active_name: Optional[str]) -> Any:
    """
    Retorna a camada de overlay do ambiente ativo, ou `{}` quando não há.

    A camada encontrada é retornada sem cópia e sem merge; o chamador
    (pipeline) é quem a aplica via `merge`, que nunca muta seus inputs.
    """
    if not active_name or not is_mapping(overlays) or active_name not in overlays:
        return {}
    return overlays[active_name]

"""
Atlas Config — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do Atlas Config.
Erros de resolução são artefatos do contrato operacional do motor e
devem ser:

- explícitos
- serializáveis
- acionáveis

Nenhum fallback silencioso é permitido.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AtlasErrorPayload:
    """
    Payload canônico de erro do Atlas Config.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Projeção
CONFIG_PROJECTION_ERROR = "CONFIG_PROJECTION_ERROR"

# Loader
CONFIG_LAYER_NOT_FOUND = "CONFIG_LAYER_NOT_FOUND"
CONFIG_UNSUPPORTED_FORMAT = "CONFIG_UNSUPPORTED_FORMAT"
CONFIG_INVALID_ROOT_TYPE = "CONFIG_INVALID_ROOT_TYPE"

# Fallback para subclasses sem código próprio
CONFIG_ERROR = "CONFIG_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def projection_error(
    *,
    message: str,
    key: str,
    actual_type: str,
    environment: Optional[str] = None,
    hint: str = "O mapa de ambientes deve ser um dicionário nome -> camada (dict). Corrija o override que o constrói.",
) -> AtlasErrorPayload:
    return AtlasErrorPayload(
        type=CONFIG_PROJECTION_ERROR,
        message=message,
        details={
            "key": key,
            "environment": environment,
            "actual_type": actual_type,
        },
        hint=hint,
    )


def layer_not_found(
    *,
    path: str,
    hint: str = "Verifique o caminho do arquivo de defaults; ele é obrigatório para a resolução.",
) -> AtlasErrorPayload:
    return AtlasErrorPayload(
        type=CONFIG_LAYER_NOT_FOUND,
        message="Arquivo de camada de configuração não encontrado",
        details={"path": path},
        hint=hint,
    )


def unsupported_format(
    *,
    path: str,
    suffix: str,
    hint: str = "Use arquivos .yaml, .yml ou .json.",
) -> AtlasErrorPayload:
    return AtlasErrorPayload(
        type=CONFIG_UNSUPPORTED_FORMAT,
        message="Formato de arquivo de configuração não suportado",
        details={"path": path, "suffix": suffix},
        hint=hint,
    )


def invalid_root_type(
    *,
    path: str,
    actual_type: str,
    hint: str = "O conteúdo raiz de uma camada deve ser um mapa chave-valor.",
) -> AtlasErrorPayload:
    return AtlasErrorPayload(
        type=CONFIG_INVALID_ROOT_TYPE,
        message="Tipo raiz inválido para camada de configuração",
        details={"path": path, "actual_type": actual_type},
        hint=hint,
    )

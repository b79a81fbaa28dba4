# src/atlas_config/core/config/loader.py
"""
Loader canônico de camadas de configuração em arquivo.

Este módulo carrega camadas a partir de arquivos YAML ou JSON e
delega a resolução ao pipeline canônico.

A configuração é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo de override (opcional; pode conter `environments`)
    - uma camada de autodetecção em memória (opcional)

Invariantes:
    - O arquivo de defaults é obrigatório
    - Um arquivo de override inexistente não é erro
    - Arquivos vazios são interpretados como `{}`
    - O conteúdo raiz de um arquivo deve ser um dicionário

Limites explícitos:
    - Não observa arquivos (sem live-reload)
    - Não consulta fontes remotas
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml  # PyYAML

from atlas_config.core.errors import invalid_root_type, layer_not_found, unsupported_format

from .errors import (
    InvalidConfigRootTypeError,
    LayerNotFoundError,
    UnsupportedConfigFormatError,
)
from .pipeline import resolve
from .selector import resolve_active_name
from .trace import ResolutionLog

PathLike = Union[str, Path]


def load_layer(path: PathLike) -> Dict[str, Any]:
    """
    Carrega um arquivo de camada e valida sua estrutura básica.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Args:
        path (PathLike): Caminho para o arquivo de camada.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo carregado como dicionário.

    Raises:
        LayerNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    path = Path(path)

    if not path.exists():
        message = f"Arquivo de camada não encontrado: {path}"
        raise LayerNotFoundError(message, payload=layer_not_found(path=str(path)))

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            text = f.read()
        data = json.loads(text) if text.strip() else None

    else:
        message = f"Formato não suportado: {path.suffix}"
        raise UnsupportedConfigFormatError(
            message,
            payload=unsupported_format(path=str(path), suffix=path.suffix),
        )

    if data is None:
        data = {}

    if not isinstance(data, dict):
        message = f"Camada deve ter raiz dict, recebido: {type(data).__name__}"
        raise InvalidConfigRootTypeError(
            message,
            payload=invalid_root_type(path=str(path), actual_type=type(data).__name__),
        )

    return data


def load_config(
    *,
    defaults_path: PathLike,
    override_path: Optional[PathLike] = None,
    autodetected: Optional[Mapping[str, Any]] = None,
    active_name: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    log: Optional[ResolutionLog] = None,
) -> Any:
    """
    Carrega camadas de arquivo e resolve a configuração efetiva.

    O nome do ambiente ativo segue a precedência de `resolve_active_name`:
    parâmetro explícito, depois `TEST_ENV` lido de `environ` (ou de
    `os.environ`, uma única vez), depois ausente.

    Raises:
        LayerNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se algum formato não for suportado.
        InvalidConfigRootTypeError: Se algum conteúdo raiz não for dict.
        ProjectionError: Se `environments` no override for malformado.
    """
    defaults = load_layer(defaults_path)

    override: Dict[str, Any] = {}
    if override_path is not None and Path(override_path).exists():
        override = load_layer(override_path)

    snapshot = dict(os.environ if environ is None else environ)

    return resolve(
        defaults,
        dict(autodetected) if autodetected is not None else {},
        override,
        resolve_active_name(active_name, snapshot),
        log=log,
    )

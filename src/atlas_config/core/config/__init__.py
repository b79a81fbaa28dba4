# src/atlas_config/core/config/__init__.py

"""
Camada de configuração do Atlas Config.

Este pacote contém as estruturas e utilitários responsáveis por
combinar camadas parciais de configuração em uma configuração efetiva.

Responsabilidades do pacote:
    - Merge determinístico de árvores (mapas mesclam, sequências substituem)
    - Seleção do overlay do ambiente ativo, com fallback para vazio
    - Resolução em ordem fixa: defaults → autodetected → override → overlay
    - Projeção das meta-chaves usadas apenas durante a resolução
    - Carregamento de camadas em YAML/JSON e hashing canônico

Invariantes:
    - Nenhum estado é mantido entre resoluções
    - Inputs nunca são mutados
    - A mesma entrada sempre produz a mesma configuração final
"""

from .constants import ENVIRONMENT_VARIABLE, ENVIRONMENTS_KEY, LAYER_ORDER
from .defaults import create_config, detect_environment, framework_defaults
from .errors import (
    ConfigError,
    InvalidConfigRootTypeError,
    LayerNotFoundError,
    ProjectionError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .layers import Layer, LayerStore
from .loader import load_config, load_layer
from .merge import deep_merge, merge, merge_all
from .pipeline import build_layer_store, resolve, resolve_layers
from .projector import project, validate_overlay_map
from .selector import resolve_active_name, select_overlay
from .trace import ResolutionLog
from .tree import NodeKind, kind_of

__all__ = [
    "ENVIRONMENT_VARIABLE",
    "ENVIRONMENTS_KEY",
    "LAYER_ORDER",
    "ConfigError",
    "InvalidConfigRootTypeError",
    "Layer",
    "LayerNotFoundError",
    "LayerStore",
    "NodeKind",
    "ProjectionError",
    "ResolutionLog",
    "UnsupportedConfigFormatError",
    "build_layer_store",
    "compute_config_hash",
    "create_config",
    "deep_merge",
    "detect_environment",
    "framework_defaults",
    "kind_of",
    "load_config",
    "load_layer",
    "merge",
    "merge_all",
    "project",
    "resolve",
    "resolve_active_name",
    "resolve_layers",
    "select_overlay",
    "validate_overlay_map",
]

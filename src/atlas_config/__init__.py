# src/atlas_config/__init__.py
"""
Atlas Config — resolução hierárquica de configuração por camadas.

Este pacote raiz define o namespace público do Atlas Config, o motor
responsável por produzir uma configuração efetiva a partir de camadas
parciais mescladas em ordem fixa de precedência:

    defaults → autodetecção → override do chamador → overlay de ambiente

Arquitetura em alto nível:
    - core.config → merge, seleção de ambiente, pipeline de resolução,
                    projeção, loader de arquivos e hashing
    - core.errors → payloads de erro serializáveis

Limites explícitos:
    - Não valida schema ou tipos de domínio
    - Não observa arquivos (sem live-reload)
    - Não consulta fontes remotas de configuração
"""
# src/atlas_config/__init__.py
from .core.config import (
    ConfigError,
    Layer,
    LayerStore,
    ProjectionError,
    ResolutionLog,
    create_config,
    load_config,
    merge,
    project,
    resolve,
    resolve_active_name,
    select_overlay,
)

__all__ = [
    "ConfigError",
    "Layer",
    "LayerStore",
    "ProjectionError",
    "ResolutionLog",
    "create_config",
    "load_config",
    "merge",
    "project",
    "resolve",
    "resolve_active_name",
    "select_overlay",
]

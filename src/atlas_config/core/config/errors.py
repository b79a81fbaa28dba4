# src/atlas_config/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Atlas Config.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento de camadas e a projeção da configuração resolvida.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Nenhum resultado parcial acompanha uma exceção

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Toda exceção converte-se em `AtlasErrorPayload` serializável

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não existem falhas transitórias: nada aqui é re-tentável
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from atlas_config.core.errors import AtlasErrorPayload, CONFIG_ERROR


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do Atlas Config.

    Carrega, além da mensagem, o payload estruturado que descreve a falha.
    Subclasses constroem o payload via helpers de `atlas_config.core.errors`.
    """

    def __init__(self, message: str, *, payload: Optional[AtlasErrorPayload] = None):
        super().__init__(message)
        self.message = message
        self.payload = payload or AtlasErrorPayload(
            type=CONFIG_ERROR,
            message=message,
            details={},
        )

    @property
    def details(self) -> Dict[str, Any]:
        return self.payload.details

    @property
    def hint(self) -> Optional[str]:
        return self.payload.hint

    def to_dict(self) -> Dict[str, Any]:
        return self.payload.to_dict()


class ProjectionError(ConfigError):
    """
    Exceção levantada quando a meta-chave de ambientes não contém um
    mapa nome-de-ambiente → camada.

    Exemplos de forma inválida:
        - {"environments": ["staging"]}
        - {"environments": {"staging": 3000}}

    Invariantes:
        - Indica bug de construção a montante, não condição de runtime
        - Nunca é re-tentada
    """


class LayerNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de camada obrigatório
    (tipicamente o de defaults) não existe no caminho informado.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando a extensão do arquivo de camada não é suportada.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz de um arquivo de camada
    não é um dicionário (`dict`).

    Limites explícitos:
        - Não tenta normalizar ou encapsular estruturas inválidas
        - Aplica-se apenas a arquivos; camadas em memória com raiz escalar
          seguem a regra de substituição do merge
    """

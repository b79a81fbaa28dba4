# src/atlas_config/core/config/layers.py
"""
Layer Store — camadas nomeadas de uma única resolução.

Este módulo define a `Layer`, fragmento nomeado de configuração, e o
`LayerStore`, coleção ordenada de camadas que participam de uma
resolução. A precedência de uma camada é a sua posição no store:
camadas adicionadas depois vencem as anteriores.

Decisões arquiteturais:
    - O store é construído a cada resolução e descartado em seguida
    - Nomes de camada são únicos dentro de um store
    - O store não realiza merge; apenas preserva ordem e identidade

Limites explícitos:
    - Não carrega arquivos
    - Não seleciona overlays de ambiente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List


@dataclass(frozen=True)
class Layer:
    """Fragmento nomeado de configuração."""

    name: str
    tree: Any = field(default_factory=dict)

    @classmethod
    def empty(cls, name: str) -> "Layer":
        return cls(name=name, tree={})


@dataclass
class LayerStore:
    """
    Coleção ordenada de camadas de uma resolução.

    Invariantes:
        - A ordem de inserção é a ordem de precedência (crescente)
        - Não existem duas camadas com o mesmo nome
    """

    _layers: List[Layer] = field(default_factory=list, init=False, repr=False)

    def add(self, name: str, tree: Any = None) -> Layer:
        if self.has(name):
            raise ValueError(f"Camada duplicada no store: '{name}'")
        layer = Layer(name=name, tree={} if tree is None else tree)
        self._layers.append(layer)
        return layer

    def has(self, name: str) -> bool:
        return any(layer.name == name for layer in self._layers)

    def get(self, name: str) -> Layer:
        for layer in self._layers:
            if layer.name == name:
                return layer
        raise KeyError(name)

    def names(self) -> List[str]:
        return [layer.name for layer in self._layers]

    def rank(self, name: str) -> int:
        """Posição de precedência da camada (0 = mais fraca)."""
        names = self.names()
        if name not in names:
            raise KeyError(name)
        return names.index(name)

    def as_dict(self) -> Dict[str, Any]:
        return {layer.name: layer.tree for layer in self._layers}

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)

# src/atlas_config/core/__init__.py
"""
Core do Atlas Config.

Este pacote contém a implementação canônica do motor de resolução de
configuração, sem dependência de frameworks de teste, navegadores ou
clientes HTTP que consomem a configuração resolvida.

O core é projetado para ser:
    - determinístico
    - puramente funcional (sem estado entre chamadas)
    - testável de forma isolada

Componentes principais:
    - config → camadas, merge, seleção de ambiente, resolução e projeção
    - errors → catálogo canônico de payloads de erro

Limites explícitos:
    - Não executa testes nem dirige navegadores
    - Não realiza chamadas HTTP
    - Não persiste a configuração resolvida
"""

# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do Atlas Config.

Garantem que o pacote raiz importa sem falhas e expõe a API pública
de resolução. Não validam política de merge nem ordem de precedência.
"""

import atlas_config


def test_public_api_is_exposed():
    for name in atlas_config.__all__:
        assert hasattr(atlas_config, name), name


def test_minimal_resolution_round():
    assert atlas_config.resolve({"a": 1}) == {"a": 1}

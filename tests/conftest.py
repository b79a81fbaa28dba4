# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas Config.

Este módulo define fixtures reutilizáveis que fornecem:
- camadas de configuração mínimas e determinísticas
- conteúdo YAML semelhante a arquivos reais de defaults e override
- um snapshot de ambiente isolado do processo

Decisões arquiteturais:
    - Fixtures retornam objetos novos a cada teste
    - Variáveis de ambiente relevantes são removidas antes de cada teste
    - Nenhuma fixture realiza I/O

Invariantes:
    - Todas as fixtures são seguras para execução em paralelo
"""

import pytest


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    """Remove do processo as variáveis lidas na fronteira de resolução."""
    for name in ("TEST_ENV", "CI", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


# =====================================================
# Camadas em memória
# =====================================================

@pytest.fixture
def defaults_layer() -> dict:
    """
    Camada de defaults semelhante ao uso real do framework.

    Contém escalares, um mapa aninhado (`use`) e uma sequência
    (`projects`), cobrindo as três variantes de ConfigTree.
    """
    return {
        "timeout": 1000,
        "retries": 2,
        "use": {
            "base_url": "http://localhost:3000",
            "trace": "on-first-retry",
            "headers": {"accept": "application/json"},
        },
        "projects": [
            {"name": "chromium"},
            {"name": "firefox"},
        ],
    }


@pytest.fixture
def override_layer() -> dict:
    """
    Override do chamador com mapa de overlays por ambiente.
    """
    return {
        "timeout": 2000,
        "use": {"base_url": "https://example.com"},
        "environments": {
            "staging": {
                "timeout": 3000,
                "use": {"base_url": "https://staging.example.com"},
                "projects": [{"name": "webkit"}],
            },
            "prod": {
                "retries": 0,
            },
        },
    }


# =====================================================
# Conteúdo de arquivos
# =====================================================

@pytest.fixture
def project_like_defaults_yaml() -> str:
    """
    YAML típico de um arquivo `config.defaults.yaml`.
    """
    return """\
timeout: 30000
retries: 2
use:
  base_url: http://localhost:3000
  video: "off"
projects:
  - name: chromium
  - name: firefox
"""


@pytest.fixture
def project_like_override_yaml() -> str:
    """
    YAML típico de um arquivo `config.local.yaml` com overlays por ambiente.
    """
    return """\
retries: 3
use:
  base_url: https://example.com
environments:
  staging:
    use:
      base_url: https://staging.example.com
    projects:
      - name: webkit
"""

# src/atlas_config/core/config/constants.py
"""
Constantes canônicas da camada de configuração.

Chaves reservadas e nomes de variáveis de ambiente lidos na fronteira
de chamada (`create_config`, `load_config`, `resolve_active_name`).
O motor de resolução em si nunca consulta o ambiente do processo.
"""

# Meta-chave do override que carrega o mapa de overlays por ambiente.
ENVIRONMENTS_KEY = "environments"

# Variável que nomeia o ambiente ativo (ex.: "staging", "prod").
ENVIRONMENT_VARIABLE = "TEST_ENV"

# Variável de integração contínua usada pela camada de autodetecção.
CI_VARIABLE = "CI"

# Nível mínimo de log do ResolutionLog.
LOG_LEVEL_VARIABLE = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

# Nomes canônicos das camadas, em ordem de precedência crescente.
LAYER_DEFAULTS = "defaults"
LAYER_AUTODETECTED = "autodetected"
LAYER_OVERRIDE = "override"
LAYER_OVERLAY = "overlay"

LAYER_ORDER = (
    LAYER_DEFAULTS,
    LAYER_AUTODETECTED,
    LAYER_OVERRIDE,
    LAYER_OVERLAY,
)

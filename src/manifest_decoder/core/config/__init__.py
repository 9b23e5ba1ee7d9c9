# src/manifest_decoder/core/config/__init__.py
"""
Camada de configuração do Manifest Decoder.

Responsabilidades do pacote:
    - Carregar arquivos de configuração (YAML/JSON)
    - Resolver a configuração final via deep-merge determinístico
    - Materializar `DecoderSettings` validadas

Limites explícitos:
    - Não decodifica manifests
    - Não interage com registry, handlers ou client
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigNotFoundError,
    ConfigTypeConflictError,
    InvalidConfigRootTypeError,
    InvalidSettingError,
    UnsupportedConfigFormatError,
)
from .loader import DEFAULT_CONFIG, load_config  # noqa: F401
from .merge import deep_merge  # noqa: F401
from .settings import DecoderSettings, configure_logging, load_settings  # noqa: F401

# src/manifest_decoder/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Manifest Decoder.

Todas herdam de `ConfigError`, permitindo captura genérica de falhas
de configuração sem confundi-las com erros de decodificação.
"""


class ConfigError(Exception):
    """Exceção base para erros de configuração."""


class ConfigNotFoundError(ConfigError):
    """
    Arquivo de configuração explicitamente informado não existe.

    O override local é a única exceção: sua ausência é tolerada.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Extensão de arquivo de configuração não suportada.

    Formatos suportados (v1): YAML (.yaml, .yml) e JSON (.json).
    O formato nunca é inferido pelo conteúdo.
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz da configuração não é um mapeamento (`dict`)."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo:
        - base:     {"decoder": {"error_on_empty": false}}
        - override: {"decoder": "strict"}

    Nenhum merge parcial é produzido em caso de conflito.
    """


class InvalidSettingError(ConfigError):
    """Valor de configuração com tipo ou domínio inválido."""

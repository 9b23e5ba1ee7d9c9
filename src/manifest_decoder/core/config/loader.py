# src/manifest_decoder/core/config/loader.py
"""
Loader canônico de configuração do Manifest Decoder.

A configuração efetiva é resolvida a partir de:
    - defaults embutidos (`DEFAULT_CONFIG`, sempre presentes)
    - um arquivo de configuração (opcional, deve existir se informado)
    - um arquivo local de overrides (opcional, ignorado se ausente)

Princípios fundamentais:
    - Configuração é declarativa e explícita
    - O formato é determinado pela extensão do arquivo
    - A mesma entrada sempre produz a mesma configuração final

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .errors import (
    ConfigNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge


DEFAULT_CONFIG: Dict[str, Any] = {
    "decoder": {
        "extensions": [".yaml", ".yml", ".json"],
        "error_on_empty": False,
        "strict_kind_check": True,
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        ConfigNotFoundError: se o arquivo não existir.
        UnsupportedConfigFormatError: se a extensão não for suportada.
        InvalidConfigRootTypeError: se o conteúdo raiz não for um dicionário.
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"config file not found: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    else:
        raise UnsupportedConfigFormatError(f"unsupported config format: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"config root must be a mapping, got: {type(data).__name__}"
        )

    return data


def load_config(
    *,
    path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Resolve a configuração efetiva: defaults → arquivo → override local.

    Args:
        path: arquivo de configuração opcional; se informado, deve existir.
        local_path: overrides locais opcionais; ignorados se o arquivo não existir.

    Raises:
        ConfigNotFoundError, UnsupportedConfigFormatError,
        InvalidConfigRootTypeError, ConfigTypeConflictError
    """
    effective = deep_merge(DEFAULT_CONFIG, {})

    if path is not None:
        effective = deep_merge(effective, load_config_file(Path(path)))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, load_config_file(local_file))

    return effective

# src/manifest_decoder/core/config/settings.py
"""
Configurações tipadas do decoder.

`DecoderSettings` é a visão imutável e validada da configuração resolvida
pelo loader. Ela controla:
    - extensions: extensões reconhecidas na varredura de diretórios
    - error_on_empty: se uma varredura sem arquivos é erro (padrão das
      variantes de diretório)
    - strict_kind_check: se `apiVersion`/`kind` declarados precisam
      coincidir com o tipo conhecido informado pelo chamador
    - log_level: nível aplicado ao logger do pacote
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .errors import InvalidSettingError
from .loader import DEFAULT_CONFIG, load_config

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class DecoderSettings:
    extensions: Tuple[str, ...] = (".yaml", ".yml", ".json")
    error_on_empty: bool = False
    strict_kind_check: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "DecoderSettings":
        decoder_cfg = config.get("decoder", {}) or {}
        logging_cfg = config.get("logging", {}) or {}

        extensions = decoder_cfg.get("extensions", DEFAULT_CONFIG["decoder"]["extensions"])
        if not isinstance(extensions, list) or not extensions:
            raise InvalidSettingError("decoder.extensions must be a non-empty list")
        normalized = []
        for ext in extensions:
            if not isinstance(ext, str) or not ext.strip():
                raise InvalidSettingError("decoder.extensions entries must be non-empty strings")
            ext = ext.strip().lower()
            normalized.append(ext if ext.startswith(".") else f".{ext}")

        error_on_empty = decoder_cfg.get("error_on_empty", False)
        strict = decoder_cfg.get("strict_kind_check", True)
        for key, value in (("error_on_empty", error_on_empty), ("strict_kind_check", strict)):
            if not isinstance(value, bool):
                raise InvalidSettingError(f"decoder.{key} must be boolean")

        level = str(logging_cfg.get("level", "WARNING")).upper()
        if level not in _LOG_LEVELS:
            raise InvalidSettingError(f"logging.level must be one of {sorted(_LOG_LEVELS)}")

        return cls(
            extensions=tuple(dict.fromkeys(normalized)),
            error_on_empty=error_on_empty,
            strict_kind_check=strict,
            log_level=level,
        )


def load_settings(path: Optional[str] = None, local_path: Optional[str] = None) -> DecoderSettings:
    return DecoderSettings.from_config(load_config(path=path, local_path=local_path))


def configure_logging(settings: DecoderSettings) -> logging.Logger:
    """Aplica o nível configurado ao logger raiz do pacote."""
    logger = logging.getLogger("manifest_decoder")
    logger.setLevel(settings.log_level)
    return logger

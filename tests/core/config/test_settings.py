# tests/core/config/test_settings.py
"""
Testes de `DecoderSettings` e da aplicação do nível de log.

As settings são a visão validada e imutável da configuração resolvida;
valores com tipo ou domínio inválido são rejeitados com
`InvalidSettingError` antes de qualquer decodificação.
"""

import dataclasses
import logging
from pathlib import Path

import pytest

from manifest_decoder.core.config import (
    DEFAULT_CONFIG,
    DecoderSettings,
    InvalidSettingError,
    configure_logging,
    load_settings,
)


def test_defaults_match_builtin_config():
    assert DecoderSettings.from_config(DEFAULT_CONFIG) == DecoderSettings()


def test_extensions_are_normalized_and_deduplicated():
    settings = DecoderSettings.from_config(
        {"decoder": {"extensions": ["YAML", ".yaml", " .json "]}}
    )
    assert settings.extensions == (".yaml", ".json")


@pytest.mark.parametrize(
    "decoder_cfg",
    [
        {"extensions": []},
        {"extensions": ".yaml"},
        {"extensions": [""]},
        {"error_on_empty": "true"},
        {"strict_kind_check": 1},
    ],
)
def test_invalid_decoder_settings_raise(decoder_cfg):
    with pytest.raises(InvalidSettingError):
        DecoderSettings.from_config({"decoder": decoder_cfg})


def test_invalid_log_level_raises():
    with pytest.raises(InvalidSettingError):
        DecoderSettings.from_config({"logging": {"level": "VERBOSE"}})


def test_settings_are_frozen():
    settings = DecoderSettings()
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.error_on_empty = True  # type: ignore[misc]


def test_load_settings_from_file(tmp_path: Path):
    """
    `load_settings` resolve a configuração do arquivo e materializa settings.

    O nível de log é normalizado para maiúsculas.
    """
    cfg = tmp_path / "decoder.yaml"
    cfg.write_text(
        "decoder:\n  error_on_empty: true\n  extensions: [yaml]\nlogging:\n  level: debug\n",
        encoding="utf-8",
    )

    settings = load_settings(str(cfg))

    assert settings.error_on_empty is True
    assert settings.extensions == (".yaml",)
    assert settings.log_level == "DEBUG"


def test_configure_logging_sets_package_level():
    logger = configure_logging(DecoderSettings(log_level="ERROR"))
    try:
        assert logger.name == "manifest_decoder"
        assert logging.getLogger("manifest_decoder").level == logging.ERROR
    finally:
        logger.setLevel(logging.NOTSET)

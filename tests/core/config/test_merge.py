# tests/core/config/test_merge.py
"""
Testes da política de deep-merge de configuração.

Política validada:
    - dict + dict  → merge recursivo
    - list         → substituição integral
    - escalar      → substituição direta
    - conflito     → `ConfigTypeConflictError`, sem merge parcial
"""

import pytest

from manifest_decoder.core.config.errors import ConfigTypeConflictError
from manifest_decoder.core.config.merge import deep_merge


def test_nested_dicts_are_merged():
    base = {"decoder": {"error_on_empty": False, "strict_kind_check": True}}
    override = {"decoder": {"error_on_empty": True}}

    out = deep_merge(base, override)

    assert out == {"decoder": {"error_on_empty": True, "strict_kind_check": True}}


def test_lists_are_replaced_not_concatenated():
    base = {"decoder": {"extensions": [".yaml", ".yml"]}}
    out = deep_merge(base, {"decoder": {"extensions": [".json"]}})
    assert out["decoder"]["extensions"] == [".json"]


def test_new_keys_are_added():
    out = deep_merge({"a": 1}, {"b": {"c": 2}})
    assert out == {"a": 1, "b": {"c": 2}}


def test_inputs_are_not_mutated():
    base = {"decoder": {"extensions": [".yaml"]}}
    override = {"decoder": {"extensions": [".json"]}}

    out = deep_merge(base, override)
    out["decoder"]["extensions"].append(".yml")

    assert base == {"decoder": {"extensions": [".yaml"]}}
    assert override == {"decoder": {"extensions": [".json"]}}


def test_type_conflict_reports_dotted_path():
    """
    Um conflito de tipos aponta a chave exata em notação pontuada.

    Exemplo: `decoder.error_on_empty` declarado como bool na base e como
    string no override.
    """
    with pytest.raises(ConfigTypeConflictError, match="decoder.error_on_empty"):
        deep_merge({"decoder": {"error_on_empty": False}}, {"decoder": {"error_on_empty": "yes"}})


def test_mapping_replaced_by_scalar_is_conflict():
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"decoder": {"error_on_empty": False}}, {"decoder": "strict"})

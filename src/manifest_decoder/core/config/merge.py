# src/manifest_decoder/core/config/merge.py
"""
Deep-merge de configuração.

Política (v1):
    - dict + dict        → merge recursivo por chave
    - list               → substituição integral
    - escalar            → substituição direta
    - conflito de tipos  → `ConfigTypeConflictError`

O merge é puramente funcional: nenhum input é mutado.
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any], _path: str = "") -> Dict[str, Any]:
    """
    Combina `base` com `override`, retornando um novo dicionário.

    Args:
        base: configuração base (ex.: defaults embutidos).
        override: overrides explícitos.

    Returns:
        Nova configuração resultante.

    Raises:
        ConfigTypeConflictError: se uma mesma chave tiver tipos incompatíveis.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"deep-merge requires mappings at '{_path or '<root>'}', got "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    merged: Dict[str, Any] = deepcopy(base)

    for key, new_value in override.items():
        key_path = f"{_path}.{key}" if _path else str(key)
        if key not in merged:
            merged[key] = deepcopy(new_value)
            continue

        old_value = merged[key]

        if isinstance(old_value, dict) and isinstance(new_value, dict):
            merged[key] = deep_merge(old_value, new_value, key_path)
        elif isinstance(new_value, list) and isinstance(old_value, list):
            merged[key] = deepcopy(new_value)
        elif old_value is None or new_value is None or type(old_value) is type(new_value):
            merged[key] = deepcopy(new_value)
        else:
            raise ConfigTypeConflictError(
                f"type conflict at '{key_path}': "
                f"{type(old_value).__name__} vs {type(new_value).__name__}"
            )

    return merged

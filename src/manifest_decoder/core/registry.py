# src/manifest_decoder/core/registry.py
"""
Registro de tipos (scheme) do Manifest Decoder.

Este módulo define o `TypeRegistry`, responsável por mapear um
`GroupVersionKind` para a classe concreta que o decodifica.

O registry é estado de processo, read-mostly:
    - construído uma única vez antes de qualquer chamada de decode
    - consultado concorrentemente por qualquer número de chamadores
    - nunca mutado pelo pipeline de decodificação

Responsabilidades do módulo:
    - Validar unicidade de GVK no registro
    - Produzir uma instância nova (protótipo) a cada lookup
    - Sinalizar kinds desconhecidos com `NotRegisteredError`, distinguível
      de qualquer outra falha de lookup

Invariantes:
    - Cada GVK registrado aponta para exatamente uma classe
    - `lookup` nunca devolve a mesma instância duas vezes

Limites explícitos:
    - Não decodifica documentos
    - Não realiza conversão entre versões de um mesmo kind
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Type

from manifest_decoder.core.exceptions import DuplicateKindError, NotRegisteredError
from manifest_decoder.core.objects.builtin import BUILTIN_KINDS
from manifest_decoder.core.objects.kinds import GroupVersionKind
from manifest_decoder.core.objects.typed import TypedObject


@dataclass
class TypeRegistry:
    """
    Registro canônico de kinds concretos.

    Decisões arquiteturais:
        - O registro ocorre na inicialização, antes do pipeline
        - A ordem de registro é preservada separadamente
        - Erros estruturais (GVK duplicado ou vazio) são fatais
    """

    _types: Dict[GroupVersionKind, Type[TypedObject]] = field(default_factory=dict, init=False, repr=False)
    _order: List[GroupVersionKind] = field(default_factory=list, init=False, repr=False)

    def register(self, cls: Type[TypedObject]) -> Type[TypedObject]:
        gvk = getattr(cls, "GVK", None)
        if not isinstance(gvk, GroupVersionKind) or not gvk.kind or not gvk.version:
            raise ValueError(f"{cls.__name__}.GVK must declare version and kind")

        if gvk in self._types:
            raise DuplicateKindError(f"Duplicate kind: {gvk}", details={"kind": gvk.kind})

        self._types[gvk] = cls
        self._order.append(gvk)
        return cls

    def recognizes(self, gvk: GroupVersionKind) -> bool:
        return gvk in self._types

    def lookup(self, gvk: GroupVersionKind) -> TypedObject:
        """
        Retorna uma nova instância vazia do tipo registrado para `gvk`.

        Raises:
            NotRegisteredError: se nenhum tipo estiver registrado para o GVK.
        """
        cls = self._types.get(gvk)
        if cls is None:
            raise NotRegisteredError(
                f"no kind is registered for {gvk}",
                details={"kind": gvk.kind, "api_version": gvk.api_version},
            )
        return cls()

    def kinds(self) -> List[GroupVersionKind]:
        return sorted(self._order, key=lambda g: (g.group, g.version, g.kind))


_default: Optional[TypeRegistry] = None
_default_lock = threading.Lock()


def default_registry() -> TypeRegistry:
    """Registry padrão do processo, inicializado uma única vez com os kinds built-in."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                registry = TypeRegistry()
                for cls in BUILTIN_KINDS:
                    registry.register(cls)
                _default = registry
    return _default

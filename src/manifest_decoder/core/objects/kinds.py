# src/manifest_decoder/core/objects/kinds.py
"""
Descritor de tipo (GroupVersionKind).

Um GVK identifica o schema de um objeto. Ele também é usado como *hint*
opcional pelo chamador, para completar documentos cujo descritor de tipo
está ausente ou parcialmente especificado.

Decisões arquiteturais:
    - O GVK é imutável (frozen)
    - Campos declarados pelo documento têm precedência sobre o hint
    - `apiVersion` segue o formato "group/version" ou apenas "version"
      (grupo core)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class GroupVersionKind:
    group: str = ""
    version: str = ""
    kind: str = ""

    @classmethod
    def from_api_version(cls, api_version: Optional[str], kind: Optional[str]) -> "GroupVersionKind":
        api_version = (api_version or "").strip()
        if "/" in api_version:
            group, _, version = api_version.partition("/")
        else:
            group, version = "", api_version
        return cls(group=group, version=version, kind=(kind or "").strip())

    @property
    def api_version(self) -> str:
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"

    def is_empty(self) -> bool:
        return not (self.group or self.version or self.kind)

    def with_defaults(self, hint: Optional["GroupVersionKind"]) -> "GroupVersionKind":
        """
        Completa campos ausentes a partir do hint.

        Grupo e versão só são herdados juntos, e apenas quando o documento
        não declara `apiVersion`; um `kind` ausente é herdado isoladamente.
        """
        if hint is None:
            return self
        out = self
        if not self.version and not self.group:
            out = replace(out, group=hint.group, version=hint.version)
        if not self.kind:
            out = replace(out, kind=hint.kind)
        return out

    def __str__(self) -> str:
        return f"{self.api_version}, Kind={self.kind}"

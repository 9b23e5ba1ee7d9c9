# src/manifest_decoder/core/objects/meta.py
"""
Metadados canônicos de objetos e o protocolo de capacidades comum.

Este módulo define:
    - `OwnerReference`: back-reference não proprietária para um objeto owner
    - `ObjectMeta`: identidade e mapas mutáveis (labels/annotations)
    - `ResourceObject` (Protocol): interface de capacidades compartilhada por
      objetos tipados e pela representação genérica

Princípios fundamentais:
    - Patches e handlers operam apenas sobre `ResourceObject`
    - Nenhum acesso reflexivo a campos arbitrários
    - Labels e annotations são `Dict[str, str]` ou `None` (mapa ausente)

Invariantes:
    - `deep_copy()` sempre produz uma instância independente
    - Alterações em uma cópia nunca vazam para o template
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from .kinds import GroupVersionKind


@dataclass
class OwnerReference:
    """Referência relacional a um owner; o owner não controla o ciclo de vida do filho."""

    api_version: str
    kind: str
    name: str
    uid: str = ""
    controller: bool = False
    block_owner_deletion: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OwnerReference":
        return cls(
            api_version=str(data.get("apiVersion", "")),
            kind=str(data.get("kind", "")),
            name=str(data.get("name", "")),
            uid=str(data.get("uid", "")),
            controller=bool(data.get("controller", False)),
            block_owner_deletion=bool(data.get("blockOwnerDeletion", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "name": self.name,
        }
        if self.uid:
            out["uid"] = self.uid
        if self.controller:
            out["controller"] = True
        if self.block_owner_deletion:
            out["blockOwnerDeletion"] = True
        return out

    def refers_to(self, other: "OwnerReference") -> bool:
        """Mesmo owner: mesmo grupo, kind e name (a versão é ignorada)."""
        own_group = GroupVersionKind.from_api_version(self.api_version, self.kind).group
        other_group = GroupVersionKind.from_api_version(other.api_version, other.kind).group
        return own_group == other_group and self.kind == other.kind and self.name == other.name


def _string_map(value: Any, field_name: str) -> Optional[Dict[str, str]]:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise TypeError(f"metadata.{field_name} must be a mapping")
    out: Dict[str, str] = {}
    for k, v in value.items():
        if isinstance(v, (dict, list)):
            raise TypeError(f"metadata.{field_name}.{k} must be a string")
        out[str(k)] = "" if v is None else str(v)
    return out


def _string_field(data: Dict[str, Any], field_name: str) -> str:
    value = data.get(field_name)
    if isinstance(value, (dict, list)):
        raise TypeError(f"metadata.{field_name} must be a string")
    return str(value or "")


@dataclass
class ObjectMeta:
    name: str = ""
    namespace: str = ""
    uid: str = ""
    labels: Optional[Dict[str, str]] = None
    annotations: Optional[Dict[str, str]] = None
    owner_references: List[OwnerReference] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ObjectMeta":
        """
        Materializa metadados a partir do mapeamento `metadata` do documento.

        Raises:
            TypeError: se `metadata`, `labels`, `annotations` ou
                `ownerReferences` tiverem formato incompatível.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise TypeError("metadata must be a mapping")

        refs = data.get("ownerReferences") or []
        if not isinstance(refs, list) or not all(isinstance(r, dict) for r in refs):
            raise TypeError("metadata.ownerReferences must be a list of mappings")

        return cls(
            name=_string_field(data, "name"),
            namespace=_string_field(data, "namespace"),
            uid=_string_field(data, "uid"),
            labels=_string_map(data.get("labels"), "labels"),
            annotations=_string_map(data.get("annotations"), "annotations"),
            owner_references=[OwnerReference.from_dict(r) for r in refs],
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.name:
            out["name"] = self.name
        if self.namespace:
            out["namespace"] = self.namespace
        if self.uid:
            out["uid"] = self.uid
        if self.labels is not None:
            out["labels"] = dict(self.labels)
        if self.annotations is not None:
            out["annotations"] = dict(self.annotations)
        if self.owner_references:
            out["ownerReferences"] = [r.to_dict() for r in self.owner_references]
        return out


@runtime_checkable
class ResourceObject(Protocol):
    """
    Interface de capacidades de um objeto decodificado.

    Satisfeita por `TypedObject` (tipos concretos registrados) e por
    `Unstructured` (representação genérica baseada em mapa). A conformidade
    é estrutural (duck typing), sem herança obrigatória.

    Atributos obrigatórios:
        - name / namespace: identidade (leitura e escrita)
        - uid: identificador atribuído pelo backend (pode ser vazio)
        - labels / annotations: mapas mutáveis ou None
        - owner_references: lista de `OwnerReference`

    Métodos:
        - group_version_kind(): descritor de tipo efetivo
        - deep_copy(): operação de protótipo/clone
    """

    name: str
    namespace: str
    uid: str
    labels: Optional[Dict[str, str]]
    annotations: Optional[Dict[str, str]]
    owner_references: List[OwnerReference]

    def group_version_kind(self) -> GroupVersionKind:
        ...

    def deep_copy(self) -> "ResourceObject":
        ...

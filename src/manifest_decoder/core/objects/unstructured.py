# src/manifest_decoder/core/objects/unstructured.py
"""
Representação genérica (map-backed) de objetos.

`Unstructured` é o resultado da decodificação quando o kind do documento
não está registrado. O mapeamento original fica acessível, sem alterações,
em `.object`; as capacidades comuns (name, namespace, labels, annotations,
owner references) leem e escrevem diretamente em `object["metadata"]`.

Invariantes:
    - Subestruturas desconhecidas (ex.: `spec`) são preservadas intactas
    - `labels`/`annotations` retornam o dict aninhado real (mutações refletem
      no objeto) ou None quando ausentes
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

from .kinds import GroupVersionKind
from .meta import OwnerReference


class Unstructured:
    def __init__(self, object: Optional[Dict[str, Any]] = None):
        self.object: Dict[str, Any] = object if object is not None else {}

    def _metadata(self, create: bool = False) -> Dict[str, Any]:
        meta = self.object.get("metadata")
        if not isinstance(meta, dict):
            meta = {}
            if create:
                self.object["metadata"] = meta
        return meta

    def _get_str(self, key: str) -> str:
        value = self._metadata().get(key)
        return "" if value is None else str(value)

    def _set(self, key: str, value: Any) -> None:
        meta = self._metadata(create=True)
        if value is None or value == "" or value == []:
            meta.pop(key, None)
        else:
            meta[key] = value

    @property
    def name(self) -> str:
        return self._get_str("name")

    @name.setter
    def name(self, value: str) -> None:
        self._set("name", value)

    @property
    def namespace(self) -> str:
        return self._get_str("namespace")

    @namespace.setter
    def namespace(self, value: str) -> None:
        self._set("namespace", value)

    @property
    def uid(self) -> str:
        return self._get_str("uid")

    @uid.setter
    def uid(self, value: str) -> None:
        self._set("uid", value)

    @property
    def labels(self) -> Optional[Dict[str, str]]:
        value = self._metadata().get("labels")
        return value if isinstance(value, dict) else None

    @labels.setter
    def labels(self, value: Optional[Dict[str, str]]) -> None:
        self._set("labels", value)

    @property
    def annotations(self) -> Optional[Dict[str, str]]:
        value = self._metadata().get("annotations")
        return value if isinstance(value, dict) else None

    @annotations.setter
    def annotations(self, value: Optional[Dict[str, str]]) -> None:
        self._set("annotations", value)

    @property
    def owner_references(self) -> List[OwnerReference]:
        refs = self._metadata().get("ownerReferences") or []
        return [OwnerReference.from_dict(r) for r in refs if isinstance(r, dict)]

    @owner_references.setter
    def owner_references(self, value: List[OwnerReference]) -> None:
        self._set("ownerReferences", [r.to_dict() for r in value])

    @property
    def kind(self) -> str:
        return str(self.object.get("kind") or "")

    @property
    def api_version(self) -> str:
        return str(self.object.get("apiVersion") or "")

    def set_group_version_kind(self, gvk: GroupVersionKind) -> None:
        self.object["apiVersion"] = gvk.api_version
        self.object["kind"] = gvk.kind

    def group_version_kind(self) -> GroupVersionKind:
        return GroupVersionKind.from_api_version(self.api_version, self.kind)

    def deep_copy(self) -> "Unstructured":
        return Unstructured(copy.deepcopy(self.object))

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self.object)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unstructured):
            return NotImplemented
        return self.object == other.object

    def __repr__(self) -> str:
        return f"Unstructured(kind={self.kind!r}, namespace={self.namespace!r}, name={self.name!r})"

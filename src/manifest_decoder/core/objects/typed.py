# src/manifest_decoder/core/objects/typed.py
"""
Base canônica de objetos tipados.

Um `TypedObject` representa um kind concreto conhecido pelo registry.
Cada subclasse declara seu `GVK` e decodifica explicitamente o próprio
corpo em `_load_body`, sem acesso reflexivo a campos arbitrários.

Decisões arquiteturais:
    - `load(data)` decodifica *nesta* instância (entrada "known-type")
    - Um `apiVersion`/`kind` declarado pelo documento precisa coincidir com
      o da classe; divergência é erro de tipo, nunca coerção silenciosa
    - Campos com formato incompatível geram `DocumentTypeMismatchError`

Limites explícitos:
    - Não serializa de volta para bytes (apenas `to_dict`)
    - Não valida schema além do formato dos campos que decodifica
"""

from __future__ import annotations

import copy
from typing import Any, ClassVar, Dict, List, Optional

from manifest_decoder.core.exceptions import DocumentTypeMismatchError

from .kinds import GroupVersionKind
from .meta import ObjectMeta, OwnerReference


class TypedObject:
    """Objeto decodificado em um tipo concreto registrado."""

    GVK: ClassVar[GroupVersionKind] = GroupVersionKind()

    def __init__(self, metadata: Optional[ObjectMeta] = None):
        self.metadata = metadata if metadata is not None else ObjectMeta()

    # -----------------------------
    # Capabilities
    # -----------------------------
    @property
    def name(self) -> str:
        return self.metadata.name

    @name.setter
    def name(self, value: str) -> None:
        self.metadata.name = value

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    @namespace.setter
    def namespace(self, value: str) -> None:
        self.metadata.namespace = value

    @property
    def uid(self) -> str:
        return self.metadata.uid

    @uid.setter
    def uid(self, value: str) -> None:
        self.metadata.uid = value

    @property
    def labels(self) -> Optional[Dict[str, str]]:
        return self.metadata.labels

    @labels.setter
    def labels(self, value: Optional[Dict[str, str]]) -> None:
        self.metadata.labels = value

    @property
    def annotations(self) -> Optional[Dict[str, str]]:
        return self.metadata.annotations

    @annotations.setter
    def annotations(self, value: Optional[Dict[str, str]]) -> None:
        self.metadata.annotations = value

    @property
    def owner_references(self) -> List[OwnerReference]:
        return self.metadata.owner_references

    @owner_references.setter
    def owner_references(self, value: List[OwnerReference]) -> None:
        self.metadata.owner_references = list(value)

    def group_version_kind(self) -> GroupVersionKind:
        return type(self).GVK

    def deep_copy(self) -> "TypedObject":
        return copy.deepcopy(self)

    # -----------------------------
    # Decoding
    # -----------------------------
    def load(self, data: Dict[str, Any], *, check_kind: bool = True) -> "TypedObject":
        """
        Decodifica um documento já parseado nesta instância.

        Args:
            data: documento parseado (mapeamento raiz).
            check_kind: exige que `apiVersion`/`kind` declarados coincidam
                com o tipo desta instância.

        Raises:
            DocumentTypeMismatchError: se o documento declara outro kind ou
                apiVersion, ou se algum campo tem formato incompatível.
        """
        expected = type(self).GVK
        stated_kind = data.get("kind") if check_kind else None
        stated_api = data.get("apiVersion") if check_kind else None
        for key, value in (("kind", stated_kind), ("apiVersion", stated_api)):
            if value is not None and not isinstance(value, str):
                raise DocumentTypeMismatchError(
                    f"{key} must be a string, got {type(value).__name__}",
                    details={"field": key},
                )
        if stated_kind and stated_kind != expected.kind:
            raise DocumentTypeMismatchError(
                "document kind does not match target type",
                details={"expected": expected.kind, "received": stated_kind},
            )
        if stated_api and stated_api != expected.api_version:
            raise DocumentTypeMismatchError(
                "document apiVersion does not match target type",
                details={"expected": expected.api_version, "received": stated_api},
            )

        try:
            metadata = ObjectMeta.from_dict(data.get("metadata"))
            self._load_body(data)
        except TypeError as e:
            raise DocumentTypeMismatchError(str(e), details={"kind": expected.kind}) from e

        self.metadata = metadata
        return self

    def _load_body(self, data: Dict[str, Any]) -> None:
        """Decodifica os campos específicos do kind; subclasses sobrescrevem."""

    def _body_dict(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        gvk = type(self).GVK
        out: Dict[str, Any] = {"apiVersion": gvk.api_version, "kind": gvk.kind}
        meta = self.metadata.to_dict()
        if meta:
            out["metadata"] = meta
        out.update(self._body_dict())
        return out

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()  # type: ignore[union-attr]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(namespace={self.namespace!r}, name={self.name!r})"

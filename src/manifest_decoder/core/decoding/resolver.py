# src/manifest_decoder/core/decoding/resolver.py
"""
Resolução de tipo (Type Resolver).

Dado um bloco de documento, produz uma instância concreta de objeto
seguindo a ordem canônica de três níveis:

    1. Tipo conhecido: o chamador fornece uma instância base; o documento é
       decodificado em uma cópia nova (ou na própria instância). Falha de
       decodificação é fatal.
    2. Registry: o tipo é resolvido pelo `TypeRegistry`, opcionalmente
       completado pelo hint (group, version, kind) quando o descritor do
       documento está ausente ou parcial.
    3. Fallback: se o registry sinaliza `NotRegisteredError`, o documento é
       decodificado na representação genérica `Unstructured`. Qualquer outro
       erro do registry é fatal.

Decisões arquiteturais:
    - JSON é detectado por documento (prefixo `{`); o restante é YAML 1.1
    - Timestamps YAML não são resolvidos implicitamente; datas permanecem
      como escritas (str), mantendo o documento compatível com JSON
    - A raiz de todo documento precisa ser um mapeamento
    - Erros carregam o arquivo de origem em `details["source"]`
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import yaml

from manifest_decoder.core.exceptions import (
    DecodeError,
    DocumentSyntaxError,
    DocumentTypeMismatchError,
    MissingKindError,
    NotRegisteredError,
)
from manifest_decoder.core.objects.kinds import GroupVersionKind
from manifest_decoder.core.objects.meta import ResourceObject
from manifest_decoder.core.objects.typed import TypedObject
from manifest_decoder.core.objects.unstructured import Unstructured
from manifest_decoder.core.registry import TypeRegistry, default_registry

from .splitter import is_json_document

logger = logging.getLogger(__name__)

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class ManifestLoader(yaml.SafeLoader):
    """`SafeLoader` sem resolução implícita de timestamps (datas ficam como str)."""


ManifestLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _stated_kind(data: Dict[str, Any], source: Optional[str]) -> GroupVersionKind:
    """Descritor declarado pelo documento; `apiVersion` e `kind` precisam ser strings."""
    for key in ("apiVersion", "kind"):
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise DocumentTypeMismatchError(
                f"{key} must be a string, got {type(value).__name__}",
                details={"source": source, "field": key},
            )
    return GroupVersionKind.from_api_version(data.get("apiVersion"), data.get("kind"))


class TypeResolver:
    def __init__(self, registry: Optional[TypeRegistry] = None, *, strict_kind_check: bool = True):
        self.registry = registry if registry is not None else default_registry()
        self.strict_kind_check = strict_kind_check

    def parse(self, block: bytes, source: Optional[str] = None) -> Dict[str, Any]:
        """
        Parseia um bloco YAML ou JSON em um mapeamento.

        Raises:
            DocumentSyntaxError: sintaxe inválida, bloco vazio ou raiz que não
                é um mapeamento.
        """
        try:
            if is_json_document(block):
                data = json.loads(block.decode("utf-8"))
            else:
                data = yaml.load(block, Loader=ManifestLoader)
        except (ValueError, yaml.YAMLError) as e:
            raise DocumentSyntaxError(
                f"malformed document: {e}", details={"source": source}
            ) from e

        if data is None:
            raise DocumentSyntaxError("document is empty", details={"source": source})
        if not isinstance(data, dict):
            raise DocumentSyntaxError(
                f"document root must be a mapping, got {type(data).__name__}",
                details={"source": source},
            )
        return data

    def decode_into(self, block: bytes, obj: TypedObject, source: Optional[str] = None) -> TypedObject:
        """Nível 1: decodifica o bloco diretamente em `obj`."""
        data = self.parse(block, source)
        try:
            return obj.load(data, check_kind=self.strict_kind_check)
        except DecodeError as e:
            e.details.setdefault("source", source)
            raise

    def resolve(
        self,
        block: bytes,
        hint: Optional[GroupVersionKind] = None,
        source: Optional[str] = None,
    ) -> ResourceObject:
        """
        Níveis 2 e 3: resolve o tipo pelo registry, caindo para `Unstructured`.

        Raises:
            DocumentSyntaxError: documento malformado.
            MissingKindError: nem o documento nem o hint informam o kind.
            DocumentTypeMismatchError: `apiVersion`/`kind` que não são strings,
                ou documento incompatível com o tipo registrado.
        """
        data = self.parse(block, source)
        stated = _stated_kind(data, source)
        gvk = stated.with_defaults(hint)
        if not gvk.kind:
            raise MissingKindError("Object 'Kind' is missing", details={"source": source})

        try:
            obj = self.registry.lookup(gvk)
        except NotRegisteredError:
            logger.debug("kind %s not registered, decoding %s as unstructured", gvk, source or "<stream>")
            generic = Unstructured(data)
            if not stated.api_version and gvk.api_version:
                generic.object["apiVersion"] = gvk.api_version
            if not stated.kind:
                generic.object["kind"] = gvk.kind
            return generic

        try:
            return obj.load(data, check_kind=self.strict_kind_check)
        except DecodeError as e:
            e.details.setdefault("source", source)
            raise

    def new_object(self, gvk: GroupVersionKind) -> ResourceObject:
        """Objeto vazio para `gvk`: tipo registrado ou `Unstructured`."""
        try:
            return self.registry.lookup(gvk)
        except NotRegisteredError:
            generic = Unstructured()
            generic.set_group_version_kind(gvk)
            return generic

"""
Resource Client em memória para testes de handlers e loaders.

Implementa o protocolo `ResourceClient` sobre um dicionário indexado por
(kind, namespace, name), levantando as exceções canônicas do client:
    - create em objeto existente → AlreadyExistsError
    - update/delete/get em objeto ausente → NotFoundError

Cada chamada é registrada em `calls` como (operação, kind, namespace, name),
permitindo asserts sobre ordem e efeitos colaterais.
"""

from typing import Any, Dict, List, Tuple

from manifest_decoder.core.client import AlreadyExistsError, NotFoundError
from manifest_decoder.core.context import HandlerContext
from manifest_decoder.core.objects.meta import ResourceObject
from manifest_decoder.core.objects.unstructured import Unstructured

Key = Tuple[str, str, str]


def _key(obj: ResourceObject) -> Key:
    return (obj.group_version_kind().kind, obj.namespace, obj.name)


class InMemoryClient:
    def __init__(self) -> None:
        self.store: Dict[Key, Dict[str, Any]] = {}
        self.calls: List[Tuple[str, str, str, str]] = []
        self.options: List[Dict[str, Any]] = []

    def _record(self, op: str, obj: ResourceObject, opts: Dict[str, Any]) -> Key:
        key = _key(obj)
        self.calls.append((op,) + key)
        self.options.append(dict(opts))
        return key

    def create(self, ctx: HandlerContext, obj: ResourceObject, **opts: Any) -> None:
        key = self._record("create", obj, opts)
        if key in self.store:
            raise AlreadyExistsError(f"{key[0]} {key[2]!r} already exists")
        self.store[key] = obj.to_dict()  # type: ignore[attr-defined]

    def update(self, ctx: HandlerContext, obj: ResourceObject, **opts: Any) -> None:
        key = self._record("update", obj, opts)
        if key not in self.store:
            raise NotFoundError(f"{key[0]} {key[2]!r} not found")
        self.store[key] = obj.to_dict()  # type: ignore[attr-defined]

    def delete(self, ctx: HandlerContext, obj: ResourceObject, **opts: Any) -> None:
        key = self._record("delete", obj, opts)
        if key not in self.store:
            raise NotFoundError(f"{key[0]} {key[2]!r} not found")
        del self.store[key]

    def get(self, ctx: HandlerContext, name: str, namespace: str, out_obj: ResourceObject) -> None:
        key = (out_obj.group_version_kind().kind, namespace, name)
        self.calls.append(("get",) + key)
        if key not in self.store:
            raise NotFoundError(f"{key[0]} {name!r} not found")
        stored = self.store[key]
        if isinstance(out_obj, Unstructured):
            out_obj.object = dict(stored)
        else:
            out_obj.load(stored)  # type: ignore[attr-defined]

    def seed(self, obj: ResourceObject) -> None:
        """Insere `obj` diretamente no store, sem registrar chamada."""
        self.store[_key(obj)] = obj.to_dict()  # type: ignore[attr-defined]

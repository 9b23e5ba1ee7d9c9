# src/manifest_decoder/core/client.py
"""
Capacidade "Resource Client" consumida pelos handlers.

O backend que efetivamente cria, atualiza, remove e consulta objetos é
um colaborador externo. Este módulo define apenas:
    - o protocolo `ResourceClient`
    - as exceções canônicas que um client deve levantar
    - predicados de correspondência de erro usados pelo combinador
      ignore-matching-error

Retry, se existir, é responsabilidade do client; este core nunca re-tenta.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from .context import HandlerContext
from .objects.meta import ResourceObject


class ResourceClientError(Exception):
    """Erro base levantado por implementações de ResourceClient."""


class AlreadyExistsError(ResourceClientError):
    """O objeto já existe no backend."""


class NotFoundError(ResourceClientError):
    """O objeto não existe no backend."""


@runtime_checkable
class ResourceClient(Protocol):
    def create(self, ctx: HandlerContext, obj: ResourceObject, **opts: Any) -> None:
        ...

    def update(self, ctx: HandlerContext, obj: ResourceObject, **opts: Any) -> None:
        ...

    def delete(self, ctx: HandlerContext, obj: ResourceObject, **opts: Any) -> None:
        ...

    def get(self, ctx: HandlerContext, name: str, namespace: str, out_obj: ResourceObject) -> None:
        ...


def _walk(err: Optional[BaseException]):
    seen = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = err.__cause__


def is_already_exists(err: BaseException) -> bool:
    return any(isinstance(e, AlreadyExistsError) for e in _walk(err))


def is_not_found(err: BaseException) -> bool:
    return any(isinstance(e, NotFoundError) for e in _walk(err))

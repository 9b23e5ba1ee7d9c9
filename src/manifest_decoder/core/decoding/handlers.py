# src/manifest_decoder/core/decoding/handlers.py
"""
Cadeia de handlers (consumo por objeto).

Um `HandlerStep` é uma função com efeito colateral, invocada com um
`HandlerContext` e um objeto já decodificado e patcheado. Uma falha
interrompe o processamento dos objetos restantes.

Primitivas de composição:
    - create_handler / update_handler / delete_handler → operações do client
    - get_handler → busca o objeto vivo por (kind, name, namespace) e delega
      o objeto *vivo*, não o decodificado
    - ignore_error_handler → engole falhas que casam com um predicado
    - chain_handlers → composição sequencial
    - noop_handler

Todos são closures com assinatura uniforme; a composição é feita por
simples envelopamento de funções.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from manifest_decoder.core.client import ResourceClient, is_already_exists, is_not_found
from manifest_decoder.core.context import HandlerContext
from manifest_decoder.core.objects.meta import ResourceObject

from .resolver import TypeResolver

HandlerStep = Callable[[HandlerContext, ResourceObject], None]
ErrorMatcher = Callable[[BaseException], bool]


def create_handler(client: ResourceClient, **opts: Any) -> HandlerStep:
    def handler(ctx: HandlerContext, obj: ResourceObject) -> None:
        client.create(ctx, obj, **opts)

    return handler


def update_handler(client: ResourceClient, **opts: Any) -> HandlerStep:
    def handler(ctx: HandlerContext, obj: ResourceObject) -> None:
        client.update(ctx, obj, **opts)

    return handler


def delete_handler(client: ResourceClient, **opts: Any) -> HandlerStep:
    def handler(ctx: HandlerContext, obj: ResourceObject) -> None:
        client.delete(ctx, obj, **opts)

    return handler


def get_handler(
    client: ResourceClient,
    handler: HandlerStep,
    resolver: Optional[TypeResolver] = None,
) -> HandlerStep:
    """
    Handler que atualiza o estado decodificado antes de agir.

    Um objeto vazio do mesmo kind é criado (tipo registrado, ou
    `Unstructured` com o GVK do objeto decodificado), preenchido via
    `client.get` e repassado a `handler`.
    """
    type_resolver = resolver if resolver is not None else TypeResolver()

    def wrapped(ctx: HandlerContext, obj: ResourceObject) -> None:
        live = type_resolver.new_object(obj.group_version_kind())
        client.get(ctx, obj.name, obj.namespace, live)
        handler(ctx, live)

    return wrapped


def ignore_error_handler(handler: HandlerStep, matcher: ErrorMatcher) -> HandlerStep:
    def wrapped(ctx: HandlerContext, obj: ResourceObject) -> None:
        try:
            handler(ctx, obj)
        except Exception as e:
            if not matcher(e):
                raise
            ctx.log(
                level="debug",
                message="handler error ignored",
                error=type(e).__name__,
                kind=obj.group_version_kind().kind,
                name=obj.name,
                namespace=obj.namespace,
            )

    return wrapped


def chain_handlers(*handlers: HandlerStep) -> HandlerStep:
    def wrapped(ctx: HandlerContext, obj: ResourceObject) -> None:
        for handler in handlers:
            handler(ctx, obj)

    return wrapped


def noop_handler() -> HandlerStep:
    def handler(ctx: HandlerContext, obj: ResourceObject) -> None:
        return None

    return handler


def create_ignore_already_exists(client: ResourceClient, **opts: Any) -> HandlerStep:
    return ignore_error_handler(create_handler(client, **opts), is_already_exists)


def delete_ignore_not_found(client: ResourceClient, **opts: Any) -> HandlerStep:
    return ignore_error_handler(delete_handler(client, **opts), is_not_found)

# src/manifest_decoder/core/decoding/loaders.py
"""
Helpers de carga genérica e aplicação direta via Resource Client.

Variantes simplificadas do orquestrador, sempre em representação
genérica (`Unstructured`) e com um documento por arquivo:
    - load_unstructured / load_unstructured_directory
    - create_resource_from_file / create_resources_from_directory
    - delete_resource_from_file / delete_resources_from_directory

Decisões arquiteturais:
    - Uma varredura de diretório sem arquivos é erro aqui
      (`error_on_empty=True`), ao contrário das variantes multi-documento
    - O namespace informado sobrescreve o do arquivo antes da chamada ao client
    - Falhas do client são encapsuladas em `HandlerError` com arquivo, kind,
      namespace e name
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from manifest_decoder.core.client import ResourceClient
from manifest_decoder.core.context import HandlerContext
from manifest_decoder.core.exceptions import (
    EmptyStreamError,
    HandlerError,
    ManifestError,
    PathNotFoundError,
    object_details,
)
from manifest_decoder.core.objects.unstructured import Unstructured

from .decoder import PathLike
from .files import resolve_files
from .resolver import TypeResolver
from .splitter import split_documents


def load_unstructured(path: PathLike, resolver: Optional[TypeResolver] = None) -> Unstructured:
    """Carrega o primeiro documento YAML/JSON de `path` como `Unstructured`."""
    type_resolver = resolver if resolver is not None else TypeResolver()
    source = str(path)
    try:
        with open(path, "rb") as f:
            block = next(split_documents(f, source), None)
    except FileNotFoundError as e:
        raise PathNotFoundError(f"error reading manifest file: {source!r}", details={"source": source}) from e

    if block is None:
        raise EmptyStreamError("no document found in file", details={"source": source})
    return Unstructured(type_resolver.parse(block, source))


def load_unstructured_directory(directory: PathLike, resolver: Optional[TypeResolver] = None) -> List[Unstructured]:
    """
    Carrega todos os arquivos reconhecidos de `directory`, um documento por arquivo.

    Raises:
        NoFilesMatchedError: se nenhum arquivo for encontrado.
        DecodeError: na primeira falha; `error.partial` contém os objetos
            carregados até então.
    """
    objects: List[Unstructured] = []
    for file in resolve_files(directory, error_on_empty=True):
        try:
            objects.append(load_unstructured(file, resolver))
        except ManifestError as e:
            e.partial = objects
            raise
    return objects


def _apply_from_file(
    action: str,
    call: Callable[..., None],
    ctx: HandlerContext,
    path: PathLike,
    namespace: str,
    opts: Any,
    resolver: Optional[TypeResolver] = None,
) -> Unstructured:
    obj = load_unstructured(path, resolver)
    obj.namespace = namespace
    try:
        call(ctx, obj, **opts)
    except Exception as e:
        raise HandlerError(
            f"error {action} unstructured object: {e}",
            details=object_details(obj, str(path)),
        ) from e
    ctx.log(level="info", message="object applied", action=action, **object_details(obj, str(path)))
    return obj


def create_resource_from_file(
    client: ResourceClient,
    path: PathLike,
    namespace: str,
    *,
    ctx: Optional[HandlerContext] = None,
    resolver: Optional[TypeResolver] = None,
    **opts: Any,
) -> Unstructured:
    return _apply_from_file("creating", client.create, ctx or HandlerContext(), path, namespace, opts, resolver)


def create_resources_from_directory(
    client: ResourceClient,
    directory: PathLike,
    namespace: str,
    *,
    ctx: Optional[HandlerContext] = None,
    resolver: Optional[TypeResolver] = None,
    **opts: Any,
) -> List[Unstructured]:
    ctx = ctx or HandlerContext()
    return [
        create_resource_from_file(client, file, namespace, ctx=ctx, resolver=resolver, **opts)
        for file in resolve_files(directory)
    ]


def delete_resource_from_file(
    client: ResourceClient,
    path: PathLike,
    namespace: str,
    *,
    ctx: Optional[HandlerContext] = None,
    resolver: Optional[TypeResolver] = None,
    **opts: Any,
) -> Unstructured:
    return _apply_from_file("deleting", client.delete, ctx or HandlerContext(), path, namespace, opts, resolver)


def delete_resources_from_directory(
    client: ResourceClient,
    directory: PathLike,
    namespace: str,
    *,
    ctx: Optional[HandlerContext] = None,
    resolver: Optional[TypeResolver] = None,
    **opts: Any,
) -> List[Unstructured]:
    ctx = ctx or HandlerContext()
    return [
        delete_resource_from_file(client, file, namespace, ctx=ctx, resolver=resolver, **opts)
        for file in resolve_files(directory)
    ]

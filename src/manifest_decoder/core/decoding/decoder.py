# src/manifest_decoder/core/decoding/decoder.py
"""
Orquestrador de decodificação (Decode Orchestrator).

Compõe File Resolver → Document Splitter → Type Resolver → Patch Chain →
(coleta | Handler Chain) nas operações públicas do pacote.

Operações:
    - decode / decode_file / decode_string → documento único, tipo conhecido
    - decode_any                           → documento único, tipo resolvido
    - decode_all_into / decode_list_items  → multi-documento, tipo conhecido, coleta
    - decode_all                           → multi-documento, tipo resolvido, coleta
    - decode_each                          → multi-documento, tipo resolvido, handler
    - decode_all_files / decode_all_files_into / decode_each_file
                                           → variantes de diretório

Política de erros:
    - Variantes de coleta anexam, em `error.partial`, os objetos
      decodificados antes da falha
    - Falha de handler vira `HandlerError` (causa encadeada) e interrompe os
      documentos e arquivos restantes
    - Nenhuma operação é re-tentada

Invariantes:
    - A ordem dos documentos no arquivo e dos arquivos no diretório é
      preservada até a saída (ou até a ordem de invocação do handler)
    - Todo objeto retornado já passou por todos os patches, em ordem
    - Arquivos abertos internamente são sempre fechados, inclusive em erro
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Optional, Sequence, Union

from manifest_decoder.core.config.settings import DecoderSettings
from manifest_decoder.core.context import HandlerContext
from manifest_decoder.core.exceptions import (
    EmptyStreamError,
    HandlerError,
    ManifestError,
    PathNotFoundError,
    object_details,
)
from manifest_decoder.core.objects.kinds import GroupVersionKind
from manifest_decoder.core.objects.lists import ObjectList
from manifest_decoder.core.objects.meta import ResourceObject
from manifest_decoder.core.objects.typed import TypedObject
from manifest_decoder.core.registry import TypeRegistry

from .files import resolve_files
from .handlers import HandlerStep
from .mutations import PatchStep, apply_patches
from .resolver import TypeResolver
from .splitter import split_documents

logger = logging.getLogger(__name__)

Stream = IO[Union[bytes, str]]
PathLike = Union[str, Path]


def _collect(objects: Iterable[ResourceObject]) -> List[ResourceObject]:
    collected: List[ResourceObject] = []
    try:
        for obj in objects:
            collected.append(obj)
    except ManifestError as e:
        e.partial = collected
        raise
    return collected


class Decoder:
    """Decoder canônico (registry + settings)."""

    def __init__(self, *, registry: Optional[TypeRegistry] = None, settings: Optional[DecoderSettings] = None):
        self.settings = settings if settings is not None else DecoderSettings()
        self.resolver = TypeResolver(registry, strict_kind_check=self.settings.strict_kind_check)

    # ------------------------------------------------------------------
    # Documento único
    # ------------------------------------------------------------------
    def _first_block(self, stream: Stream, source: Optional[str]) -> bytes:
        block = next(split_documents(stream, source), None)
        if block is None:
            raise EmptyStreamError("no document found in stream", details={"source": source})
        return block

    def decode(self, stream: Stream, obj: TypedObject, *patches: PatchStep, source: Optional[str] = None) -> TypedObject:
        """
        Decodifica o primeiro documento do stream em `obj` (tipo conhecido).

        Conteúdo após o primeiro documento é ignorado, sem validação.

        Raises:
            EmptyStreamError: o stream não contém documento.
            DecodeError: documento malformado ou incompatível com `obj`.
            PatchError: falha em um patch.
        """
        block = self._first_block(stream, source)
        self.resolver.decode_into(block, obj, source)
        return apply_patches(obj, patches, source)

    def decode_file(self, path: PathLike, obj: TypedObject, *patches: PatchStep) -> TypedObject:
        try:
            f = open(path, "rb")
        except FileNotFoundError as e:
            raise PathNotFoundError(f"error reading manifest file: {str(path)!r}", details={"source": str(path)}) from e
        with f:
            return self.decode(f, obj, *patches, source=str(path))

    def decode_string(self, text: str, obj: TypedObject, *patches: PatchStep) -> TypedObject:
        return self.decode(io.StringIO(text), obj, *patches)

    def decode_any(
        self,
        stream: Stream,
        *patches: PatchStep,
        hint: Optional[GroupVersionKind] = None,
        source: Optional[str] = None,
    ) -> ResourceObject:
        """Decodifica o primeiro documento resolvendo o tipo (registry → Unstructured)."""
        block = self._first_block(stream, source)
        obj = self.resolver.resolve(block, hint, source)
        return apply_patches(obj, patches, source)

    # ------------------------------------------------------------------
    # Multi-documento
    # ------------------------------------------------------------------
    def _iter_stream(
        self,
        stream: Stream,
        patches: Sequence[PatchStep],
        *,
        hint: Optional[GroupVersionKind] = None,
        base: Optional[TypedObject] = None,
        source: Optional[str] = None,
    ) -> Iterator[ResourceObject]:
        for block in split_documents(stream, source):
            if base is not None:
                obj = self.resolver.decode_into(block, base.deep_copy(), source)
            else:
                obj = self.resolver.resolve(block, hint, source)
            yield apply_patches(obj, patches, source)

    def _iter_files(
        self,
        files: Sequence[str],
        patches: Sequence[PatchStep],
        *,
        hint: Optional[GroupVersionKind] = None,
        base: Optional[TypedObject] = None,
    ) -> Iterator[ResourceObject]:
        for file in files:
            logger.debug("decoding %s", file)
            with open(file, "rb") as f:
                yield from self._iter_stream(f, patches, hint=hint, base=base, source=file)

    def _resolve_files(self, path: PathLike, error_on_empty: Optional[bool]) -> List[str]:
        return resolve_files(
            path,
            extensions=self.settings.extensions,
            error_on_empty=self.settings.error_on_empty if error_on_empty is None else error_on_empty,
        )

    def _dispatch(self, ctx: HandlerContext, handler: HandlerStep, obj: ResourceObject, source: Optional[str]) -> None:
        details = object_details(obj, source)
        try:
            handler(ctx, obj)
        except Exception as e:
            ctx.log(level="error", message="handler failed", error=type(e).__name__, **details)
            raise HandlerError(f"handler failed: {e}", details=details) from e
        ctx.log(level="info", message="object handled", **details)

    def decode_all_into(
        self, stream: Stream, base: TypedObject, *patches: PatchStep, source: Optional[str] = None
    ) -> List[TypedObject]:
        """Cada documento é decodificado em uma cópia nova de `base`."""
        return _collect(self._iter_stream(stream, patches, base=base, source=source))  # type: ignore[return-value]

    def decode_list_items(
        self, stream: Stream, obj_list: ObjectList, *patches: PatchStep, source: Optional[str] = None
    ) -> ObjectList:
        """
        Materializa os documentos do stream em `obj_list.items`.

        Os itens são do tipo `obj_list.item_type`, em ordem de documento,
        com os patches já aplicados. Em caso de falha, `items` recebe os
        itens decodificados até o erro.
        """
        try:
            items = self.decode_all_into(stream, obj_list.new_item(), *patches, source=source)
        except ManifestError as e:
            obj_list.items = list(e.partial)
            raise
        obj_list.items = items
        return obj_list

    def decode_all(
        self,
        stream: Stream,
        *patches: PatchStep,
        hint: Optional[GroupVersionKind] = None,
        source: Optional[str] = None,
    ) -> List[ResourceObject]:
        """Cada documento é resolvido independentemente (streams heterogêneos)."""
        return _collect(self._iter_stream(stream, patches, hint=hint, source=source))

    def decode_each(
        self,
        ctx: HandlerContext,
        stream: Stream,
        handler: HandlerStep,
        *patches: PatchStep,
        hint: Optional[GroupVersionKind] = None,
        source: Optional[str] = None,
    ) -> int:
        """
        Entrega cada objeto resolvido e patcheado a `handler`, em ordem.

        Returns:
            Quantidade de objetos entregues ao handler.

        Raises:
            HandlerError: na primeira falha de handler; documentos restantes
                não são lidos.
        """
        handled = 0
        for obj in self._iter_stream(stream, patches, hint=hint, source=source):
            self._dispatch(ctx, handler, obj, source)
            handled += 1
        return handled

    # ------------------------------------------------------------------
    # Variantes de diretório
    # ------------------------------------------------------------------
    def decode_all_files(
        self,
        path: PathLike,
        *patches: PatchStep,
        hint: Optional[GroupVersionKind] = None,
        error_on_empty: Optional[bool] = None,
    ) -> List[ResourceObject]:
        files = self._resolve_files(path, error_on_empty)
        return _collect(self._iter_files(files, patches, hint=hint))

    def decode_all_files_into(
        self,
        path: PathLike,
        base: TypedObject,
        *patches: PatchStep,
        error_on_empty: Optional[bool] = None,
    ) -> List[TypedObject]:
        files = self._resolve_files(path, error_on_empty)
        return _collect(self._iter_files(files, patches, base=base))  # type: ignore[return-value]

    def decode_each_file(
        self,
        ctx: HandlerContext,
        path: PathLike,
        handler: HandlerStep,
        *patches: PatchStep,
        hint: Optional[GroupVersionKind] = None,
        error_on_empty: Optional[bool] = None,
    ) -> int:
        """Dispatch contínuo entre arquivos; falha no arquivo N aborta N+1..fim."""
        files = self._resolve_files(path, error_on_empty)
        handled = 0
        for file in files:
            with open(file, "rb") as f:
                for obj in self._iter_stream(f, patches, hint=hint, source=file):
                    self._dispatch(ctx, handler, obj, file)
                    handled += 1
        return handled


# ----------------------------------------------------------------------
# Atalhos com registry e settings padrão
# ----------------------------------------------------------------------

def decode(stream: Stream, obj: TypedObject, *patches: PatchStep) -> TypedObject:
    return Decoder().decode(stream, obj, *patches)


def decode_file(path: PathLike, obj: TypedObject, *patches: PatchStep) -> TypedObject:
    return Decoder().decode_file(path, obj, *patches)


def decode_string(text: str, obj: TypedObject, *patches: PatchStep) -> TypedObject:
    return Decoder().decode_string(text, obj, *patches)


def decode_any(stream: Stream, *patches: PatchStep, hint: Optional[GroupVersionKind] = None) -> ResourceObject:
    return Decoder().decode_any(stream, *patches, hint=hint)


def decode_all_into(stream: Stream, base: TypedObject, *patches: PatchStep) -> List[TypedObject]:
    return Decoder().decode_all_into(stream, base, *patches)


def decode_list_items(stream: Stream, obj_list: ObjectList, *patches: PatchStep) -> ObjectList:
    return Decoder().decode_list_items(stream, obj_list, *patches)


def decode_all(stream: Stream, *patches: PatchStep, hint: Optional[GroupVersionKind] = None) -> List[ResourceObject]:
    return Decoder().decode_all(stream, *patches, hint=hint)


def decode_each(
    ctx: HandlerContext,
    stream: Stream,
    handler: HandlerStep,
    *patches: PatchStep,
    hint: Optional[GroupVersionKind] = None,
) -> int:
    return Decoder().decode_each(ctx, stream, handler, *patches, hint=hint)


def decode_all_files(
    path: PathLike,
    *patches: PatchStep,
    hint: Optional[GroupVersionKind] = None,
    error_on_empty: bool = False,
) -> List[ResourceObject]:
    return Decoder().decode_all_files(path, *patches, hint=hint, error_on_empty=error_on_empty)


def decode_all_files_into(
    path: PathLike, base: TypedObject, *patches: PatchStep, error_on_empty: bool = False
) -> List[TypedObject]:
    return Decoder().decode_all_files_into(path, base, *patches, error_on_empty=error_on_empty)


def decode_each_file(
    ctx: HandlerContext,
    path: PathLike,
    handler: HandlerStep,
    *patches: PatchStep,
    hint: Optional[GroupVersionKind] = None,
    error_on_empty: bool = False,
) -> int:
    return Decoder().decode_each_file(ctx, path, handler, *patches, hint=hint, error_on_empty=error_on_empty)

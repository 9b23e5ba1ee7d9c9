# src/manifest_decoder/core/exceptions.py
"""
Manifest Decoder — Canonical Exceptions (v1)

Este módulo define a hierarquia canônica de exceções do pipeline de
decodificação. Erros são artefatos de domínio e devem ser:

- explícitos
- serializáveis (via `to_dict`)
- rastreáveis (arquivo de origem, kind, name, namespace)

Famílias:
    - ResolutionError → caminho inexistente, não-diretório, nenhum arquivo casado
    - DecodeError     → sintaxe inválida, tipo incompatível, kind ausente, stream vazio
    - NotRegisteredError → kind desconhecido no registry (gatilho de fallback)
    - PatchError      → falha em um passo da cadeia de mutações
    - HandlerError    → falha em um handler durante o dispatch

Nenhum erro é re-tentado automaticamente neste core.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Catálogo canônico de códigos (v1)
# ---------------------------------------------------------------------------

RESOLUTION_PATH_NOT_FOUND = "RESOLUTION_PATH_NOT_FOUND"
RESOLUTION_NOT_A_DIRECTORY = "RESOLUTION_NOT_A_DIRECTORY"
RESOLUTION_NO_FILES = "RESOLUTION_NO_FILES"

DECODE_SYNTAX_ERROR = "DECODE_SYNTAX_ERROR"
DECODE_TYPE_MISMATCH = "DECODE_TYPE_MISMATCH"
DECODE_MISSING_KIND = "DECODE_MISSING_KIND"
DECODE_EMPTY_STREAM = "DECODE_EMPTY_STREAM"

REGISTRY_NOT_REGISTERED = "REGISTRY_NOT_REGISTERED"
REGISTRY_DUPLICATE_KIND = "REGISTRY_DUPLICATE_KIND"

PATCH_FAILED = "PATCH_FAILED"
PATCH_OWNER_REFERENCE = "PATCH_OWNER_REFERENCE"

HANDLER_FAILED = "HANDLER_FAILED"
CONTEXT_CANCELLED = "CONTEXT_CANCELLED"


class ManifestError(Exception):
    """
    Exceção base do Manifest Decoder.

    Campos:
    - code: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados para diagnóstico (source, kind, name, namespace)
    - partial: objetos já decodificados antes da falha (variantes "collect")

    Importante:
    - `details` deve conter apenas dados serializáveis
    - Stack traces nunca entram no payload
    """

    code: str = "MANIFEST_ERROR"

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.partial: List[Any] = []

    def __str__(self) -> str:
        context = ", ".join(
            f"{key}={value!r}" for key, value in self.details.items() if value not in (None, "")
        )
        if not context:
            return self.message
        return f"{self.message} ({context})"

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return {
            "type": self.code,
            "message": self.message,
            "details": dict(self.details),
        }


# ---------------------------------------------------------------------------
# Resolução de arquivos
# ---------------------------------------------------------------------------

class ResolutionError(ManifestError):
    """Falha ao resolver um caminho em um conjunto de arquivos candidatos."""


class PathNotFoundError(ResolutionError):
    """Diretório (ou diretório pai de um prefixo) não existe."""

    code = RESOLUTION_PATH_NOT_FOUND


class NotADirectoryResolutionError(ResolutionError):
    """O caminho aponta para um arquivo regular, não para um diretório."""

    code = RESOLUTION_NOT_A_DIRECTORY


class NoFilesMatchedError(ResolutionError):
    """Nenhum arquivo casou com o caminho/prefixo quando `error_on_empty` está ativo."""

    code = RESOLUTION_NO_FILES


# ---------------------------------------------------------------------------
# Decodificação
# ---------------------------------------------------------------------------

class DecodeError(ManifestError):
    """Erro fatal de decodificação de um documento."""


class DocumentSyntaxError(DecodeError):
    """Documento YAML/JSON malformado ou com raiz que não é um mapeamento."""

    code = DECODE_SYNTAX_ERROR


class DocumentTypeMismatchError(DecodeError):
    """Documento incompatível com o tipo concreto solicitado pelo chamador."""

    code = DECODE_TYPE_MISMATCH


class MissingKindError(DecodeError):
    """Documento sem `kind` e sem hint capaz de completá-lo."""

    code = DECODE_MISSING_KIND


class EmptyStreamError(DecodeError):
    """Stream não contém nenhum documento."""

    code = DECODE_EMPTY_STREAM


# ---------------------------------------------------------------------------
# Registry de tipos
# ---------------------------------------------------------------------------

class NotRegisteredError(ManifestError):
    """
    Kind não registrado no registry de tipos.

    Não é um erro visível ao usuário durante a resolução: o TypeResolver
    o intercepta e cai para a representação genérica (`Unstructured`).
    """

    code = REGISTRY_NOT_REGISTERED


class DuplicateKindError(ManifestError):
    """Tentativa de registrar duas vezes o mesmo GroupVersionKind."""

    code = REGISTRY_DUPLICATE_KIND


# ---------------------------------------------------------------------------
# Cadeias de patch e handler
# ---------------------------------------------------------------------------

class PatchError(ManifestError):
    """Um passo da cadeia de mutações falhou; o restante da cadeia é abortado."""

    code = PATCH_FAILED


class OwnerReferenceError(PatchError):
    """Owner reference inválida (owner sem identidade ou em outro namespace)."""

    code = PATCH_OWNER_REFERENCE


class HandlerError(ManifestError):
    """Um handler falhou; o processamento dos objetos restantes é interrompido."""

    code = HANDLER_FAILED


class ContextCancelledError(ManifestError):
    """Contexto cancelado, sinalizado por um handler que verificou o cancelamento."""

    code = CONTEXT_CANCELLED


def object_details(obj: Any, source: Optional[str] = None) -> Dict[str, Any]:
    """Extrai kind/name/namespace de um objeto para enriquecer `details`."""
    details: Dict[str, Any] = {"source": source}
    if obj is None:
        return details
    gvk = obj.group_version_kind()
    details["kind"] = gvk.kind
    details["name"] = obj.name
    details["namespace"] = obj.namespace
    return details

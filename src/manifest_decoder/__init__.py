# src/manifest_decoder/__init__.py
"""
Manifest Decoder — pipeline genérico de decodificação de objetos YAML/JSON.

Ingere documentos de arquivos, diretórios, streams de bytes ou strings,
resolve cada documento em um objeto tipado (ou na representação genérica
`Unstructured` quando o kind não está registrado), aplica uma cadeia
configurável de patches e, opcionalmente, entrega cada objeto a uma
cadeia de handlers cuja falha interrompe o processamento.

Princípios centrais:
    - Ordem estrita: documentos e arquivos são processados em ordem
      determinística
    - Falhas são explícitas, tipadas e carregam contexto de origem
    - Patches e handlers são funções compostas por envelopamento
"""

from .core.client import (
    AlreadyExistsError,
    NotFoundError,
    ResourceClient,
    ResourceClientError,
    is_already_exists,
    is_not_found,
)
from .core.config import DecoderSettings, configure_logging, load_settings
from .core.context import HandlerContext
from .core.decoding import (
    Decoder,
    TypeResolver,
    apply_patches,
    chain_handlers,
    create_handler,
    create_ignore_already_exists,
    create_resource_from_file,
    create_resources_from_directory,
    decode,
    decode_all,
    decode_all_files,
    decode_all_files_into,
    decode_all_into,
    decode_any,
    decode_each,
    decode_each_file,
    decode_file,
    decode_list_items,
    decode_string,
    delete_handler,
    delete_ignore_not_found,
    delete_resource_from_file,
    delete_resources_from_directory,
    get_handler,
    ignore_error_handler,
    load_unstructured,
    load_unstructured_directory,
    mutate_annotations,
    mutate_labels,
    mutate_namespace,
    mutate_owner,
    noop_handler,
    resolve_files,
    split_documents,
    update_handler,
)
from .core.objects import (
    ConfigMap,
    GroupVersionKind,
    ObjectList,
    ObjectMeta,
    OwnerReference,
    ResourceObject,
    Secret,
    ServiceAccount,
    TypedObject,
    Unstructured,
)
from .core.registry import TypeRegistry, default_registry

__all__ = [
    "AlreadyExistsError",
    "ConfigMap",
    "Decoder",
    "DecoderSettings",
    "GroupVersionKind",
    "HandlerContext",
    "NotFoundError",
    "ObjectList",
    "ObjectMeta",
    "OwnerReference",
    "ResourceClient",
    "ResourceClientError",
    "ResourceObject",
    "Secret",
    "ServiceAccount",
    "TypeRegistry",
    "TypeResolver",
    "TypedObject",
    "Unstructured",
    "apply_patches",
    "chain_handlers",
    "configure_logging",
    "create_handler",
    "create_ignore_already_exists",
    "create_resource_from_file",
    "create_resources_from_directory",
    "decode",
    "decode_all",
    "decode_all_files",
    "decode_all_files_into",
    "decode_all_into",
    "decode_any",
    "decode_each",
    "decode_each_file",
    "decode_file",
    "decode_list_items",
    "decode_string",
    "default_registry",
    "delete_handler",
    "delete_ignore_not_found",
    "delete_resource_from_file",
    "delete_resources_from_directory",
    "get_handler",
    "ignore_error_handler",
    "is_already_exists",
    "is_not_found",
    "load_settings",
    "load_unstructured",
    "load_unstructured_directory",
    "mutate_annotations",
    "mutate_labels",
    "mutate_namespace",
    "mutate_owner",
    "noop_handler",
    "resolve_files",
    "split_documents",
    "update_handler",
]

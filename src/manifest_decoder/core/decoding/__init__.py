# src/manifest_decoder/core/decoding/__init__.py
"""
Pipeline de decodificação do Manifest Decoder.

Fluxo estritamente descendente:

    files (File Resolver) → splitter (Document Splitter)
        → resolver (Type Resolver) → mutations (Patch Chain)
        → coleta | handlers (Handler Chain)

O módulo `decoder` compõe essas peças nas operações públicas; `loaders`
oferece atalhos de carga genérica e aplicação direta via client.
"""

from .decoder import (  # noqa: F401
    Decoder,
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
)
from .files import DEFAULT_EXTENSIONS, resolve_files  # noqa: F401
from .handlers import (  # noqa: F401
    HandlerStep,
    chain_handlers,
    create_handler,
    create_ignore_already_exists,
    delete_handler,
    delete_ignore_not_found,
    get_handler,
    ignore_error_handler,
    noop_handler,
    update_handler,
)
from .loaders import (  # noqa: F401
    create_resource_from_file,
    create_resources_from_directory,
    delete_resource_from_file,
    delete_resources_from_directory,
    load_unstructured,
    load_unstructured_directory,
)
from .mutations import (  # noqa: F401
    PatchStep,
    apply_patches,
    mutate_annotations,
    mutate_labels,
    mutate_namespace,
    mutate_owner,
)
from .resolver import TypeResolver  # noqa: F401
from .splitter import is_json_document, split_documents  # noqa: F401

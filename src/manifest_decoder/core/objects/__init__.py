# src/manifest_decoder/core/objects/__init__.py
"""
Modelo de dados do Manifest Decoder.

- kinds        → `GroupVersionKind` (descritor de tipo / hint)
- meta         → `ObjectMeta`, `OwnerReference`, protocolo `ResourceObject`
- typed        → `TypedObject`, base de kinds concretos
- builtin      → `ConfigMap`, `Secret`, `ServiceAccount`
- unstructured → `Unstructured`, representação genérica baseada em mapa
- lists        → `ObjectList`
"""

from .builtin import BUILTIN_KINDS, ConfigMap, Secret, ServiceAccount  # noqa: F401
from .kinds import GroupVersionKind  # noqa: F401
from .lists import ObjectList  # noqa: F401
from .meta import ObjectMeta, OwnerReference, ResourceObject  # noqa: F401
from .typed import TypedObject  # noqa: F401
from .unstructured import Unstructured  # noqa: F401

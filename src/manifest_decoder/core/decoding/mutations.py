# src/manifest_decoder/core/decoding/mutations.py
"""
Cadeia de patches (mutações pós-decodificação).

Um `PatchStep` é uma função pura de mutação sobre um objeto decodificado.
Os passos executam estritamente na ordem fornecida; o primeiro que falhar
aborta a cadeia e se torna a causa da falha da decodificação que o contém.

Passos padrão:
    - mutate_labels       → adiciona/sobrescreve labels (cria o mapa se ausente)
    - mutate_annotations  → mesma semântica para annotations
    - mutate_namespace    → sobrescreve o namespace incondicionalmente
    - mutate_owner        → registra uma owner reference não proprietária

Invariantes:
    - Nenhum passo é pulado, exceto após a falha de um passo anterior
    - Quando dois passos escrevem a mesma chave, o último aplicado prevalece
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence

from manifest_decoder.core.exceptions import (
    OwnerReferenceError,
    PatchError,
    object_details,
)
from manifest_decoder.core.objects.meta import OwnerReference, ResourceObject

PatchStep = Callable[[ResourceObject], None]


def apply_patches(obj: ResourceObject, patches: Sequence[PatchStep], source: Optional[str] = None) -> ResourceObject:
    """
    Aplica `patches` em ordem sobre `obj`.

    Raises:
        PatchError: no primeiro passo que falhar (a exceção original fica em
            `__cause__`); `PatchError` levantados pelo passo propagam
            enriquecidos com o contexto do objeto.
    """
    for index, patch in enumerate(patches):
        try:
            patch(obj)
        except PatchError as e:
            for key, value in object_details(obj, source).items():
                e.details.setdefault(key, value)
            e.details.setdefault("patch_index", index)
            raise
        except Exception as e:
            details = object_details(obj, source)
            details["patch_index"] = index
            raise PatchError(f"patch failed: {e}", details=details) from e
    return obj


def mutate_labels(overrides: Dict[str, str]) -> PatchStep:
    def patch(obj: ResourceObject) -> None:
        labels = obj.labels
        if labels is None:
            labels = {}
            obj.labels = labels
            labels = obj.labels
        labels.update(overrides)

    return patch


def mutate_annotations(overrides: Dict[str, str]) -> PatchStep:
    def patch(obj: ResourceObject) -> None:
        annotations = obj.annotations
        if annotations is None:
            annotations = {}
            obj.annotations = annotations
            annotations = obj.annotations
        annotations.update(overrides)

    return patch


def mutate_namespace(namespace: str) -> PatchStep:
    def patch(obj: ResourceObject) -> None:
        obj.namespace = namespace

    return patch


def mutate_owner(owner: ResourceObject, *, controller: bool = False) -> PatchStep:
    """
    Registra `owner` como owner reference do objeto.

    A referência é apenas relacional: o owner não assume o ciclo de vida
    do filho. Uma referência existente para o mesmo owner (grupo, kind,
    name) é substituída.

    Raises (na aplicação):
        OwnerReferenceError: owner sem kind/name, ou owner namespaced em
            namespace diferente do objeto.
    """

    def patch(obj: ResourceObject) -> None:
        gvk = owner.group_version_kind()
        if not gvk.kind or not owner.name:
            raise OwnerReferenceError(
                "owner must have a kind and a name",
                details={"owner_kind": gvk.kind, "owner_name": owner.name},
            )
        if owner.namespace and owner.namespace != obj.namespace:
            raise OwnerReferenceError(
                "cross-namespace owner references are disallowed",
                details={"owner_namespace": owner.namespace},
            )

        ref = OwnerReference(
            api_version=gvk.api_version,
            kind=gvk.kind,
            name=owner.name,
            uid=owner.uid,
            controller=controller,
            block_owner_deletion=controller,
        )
        refs = [r for r in obj.owner_references if not r.refers_to(ref)]
        refs.append(ref)
        obj.owner_references = refs

    return patch

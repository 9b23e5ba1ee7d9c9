# src/manifest_decoder/core/objects/lists.py
"""Contêiner homogêneo de objetos, usado apenas por `decode_list_items`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Type

from .kinds import GroupVersionKind
from .typed import TypedObject


@dataclass
class ObjectList:
    item_type: Type[TypedObject]
    items: List[TypedObject] = field(default_factory=list)

    def new_item(self) -> TypedObject:
        return self.item_type()

    def group_version_kind(self) -> GroupVersionKind:
        item = self.item_type.GVK
        return GroupVersionKind(group=item.group, version=item.version, kind=f"{item.kind}List")

    def __len__(self) -> int:
        return len(self.items)

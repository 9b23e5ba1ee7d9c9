# src/manifest_decoder/core/objects/builtin.py
"""Kinds concretos pré-registrados no registry padrão (core/v1)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .kinds import GroupVersionKind
from .typed import TypedObject


def _str_map(value: Any, field_name: str) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"{field_name} must be a mapping of strings")
    out: Dict[str, str] = {}
    for k, v in value.items():
        if isinstance(v, (dict, list)):
            raise TypeError(f"{field_name}.{k} must be a string")
        out[str(k)] = "" if v is None else str(v)
    return out


class ConfigMap(TypedObject):
    GVK = GroupVersionKind(group="", version="v1", kind="ConfigMap")

    def __init__(self, metadata=None, data: Optional[Dict[str, str]] = None,
                 binary_data: Optional[Dict[str, str]] = None):
        super().__init__(metadata)
        self.data: Dict[str, str] = dict(data or {})
        self.binary_data: Dict[str, str] = dict(binary_data or {})

    def _load_body(self, data: Dict[str, Any]) -> None:
        self.data = _str_map(data.get("data"), "data")
        self.binary_data = _str_map(data.get("binaryData"), "binaryData")

    def _body_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.data:
            out["data"] = dict(self.data)
        if self.binary_data:
            out["binaryData"] = dict(self.binary_data)
        return out


class Secret(TypedObject):
    GVK = GroupVersionKind(group="", version="v1", kind="Secret")

    def __init__(self, metadata=None, type: str = "Opaque",
                 data: Optional[Dict[str, str]] = None,
                 string_data: Optional[Dict[str, str]] = None):
        super().__init__(metadata)
        self.type = type
        self.data: Dict[str, str] = dict(data or {})
        self.string_data: Dict[str, str] = dict(string_data or {})

    def _load_body(self, data: Dict[str, Any]) -> None:
        secret_type = data.get("type", "Opaque")
        if not isinstance(secret_type, str):
            raise TypeError("type must be a string")
        self.type = secret_type
        self.data = _str_map(data.get("data"), "data")
        self.string_data = _str_map(data.get("stringData"), "stringData")

    def _body_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type}
        if self.data:
            out["data"] = dict(self.data)
        if self.string_data:
            out["stringData"] = dict(self.string_data)
        return out


class ServiceAccount(TypedObject):
    GVK = GroupVersionKind(group="", version="v1", kind="ServiceAccount")

    def __init__(self, metadata=None, secrets: Optional[List[str]] = None,
                 automount_service_account_token: Optional[bool] = None):
        super().__init__(metadata)
        self.secrets: List[str] = list(secrets or [])
        self.automount_service_account_token = automount_service_account_token

    def _load_body(self, data: Dict[str, Any]) -> None:
        secrets = data.get("secrets") or []
        if not isinstance(secrets, list):
            raise TypeError("secrets must be a list")
        names: List[str] = []
        for i, ref in enumerate(secrets):
            if not isinstance(ref, dict) or not isinstance(ref.get("name"), str):
                raise TypeError(f"secrets[{i}] must be a mapping with a string name")
            names.append(ref["name"])
        automount = data.get("automountServiceAccountToken")
        if automount is not None and not isinstance(automount, bool):
            raise TypeError("automountServiceAccountToken must be a boolean")
        self.secrets = names
        self.automount_service_account_token = automount

    def _body_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.secrets:
            out["secrets"] = [{"name": n} for n in self.secrets]
        if self.automount_service_account_token is not None:
            out["automountServiceAccountToken"] = self.automount_service_account_token
        return out


BUILTIN_KINDS = (ConfigMap, Secret, ServiceAccount)

"""
Fixtures compartilhadas da suíte de testes do Manifest Decoder.

Este módulo centraliza os insumos reutilizados pelos testes do core:
    - manifests YAML/JSON em forma de string (kinds registrados e não registrados)
    - um diretório temporário com o cenário canônico a.yaml / b.yml / c.json
    - um `HandlerContext` novo por teste
    - um Resource Client em memória (`InMemoryClient`)

Decisões arquiteturais:
    - Manifests são fornecidos como strings, não como arquivos físicos,
      exceto no cenário de diretório
    - Nenhuma fixture compartilha estado mutável entre testes
    - O registry padrão é usado como está; testes que precisam de kinds
      próprios constroem um `TypeRegistry` local
"""

from pathlib import Path

import pytest

from manifest_decoder.core.context import HandlerContext
from tests.fixtures.clients.in_memory import InMemoryClient


CONFIGMAP_YAML = """\
apiVersion: v1
kind: ConfigMap
metadata:
  name: app-config
  namespace: default
  labels:
    app: demo
data:
  mode: fast
"""

WIDGET_YAML = """\
apiVersion: example.io/v1alpha1
kind: Widget
metadata:
  name: gizmo
spec:
  replicas: 3
  nested:
    items: [a, b]
"""


@pytest.fixture
def configmap_yaml() -> str:
    """Um único ConfigMap (kind registrado no registry padrão)."""
    return CONFIGMAP_YAML


@pytest.fixture
def widget_yaml() -> str:
    """Um kind não registrado, com `spec` aninhado a ser preservado."""
    return WIDGET_YAML


@pytest.fixture
def multi_doc_yaml() -> str:
    """
    Stream heterogêneo com três documentos.

    Inclui delimitador com comentário e um bloco vazio, que deve ser
    descartado pelo splitter sem virar documento.
    """
    return """\
apiVersion: v1
kind: ConfigMap
metadata:
  name: first
---
apiVersion: v1
kind: Secret
metadata:
  name: second
stringData:
  token: abc
--- # third document
# apenas comentário
---
apiVersion: example.io/v1alpha1
kind: Widget
metadata:
  name: third
spec:
  size: 1
"""


@pytest.fixture
def manifest_dir(tmp_path: Path) -> Path:
    """
    Diretório com o cenário canônico de varredura.

    Estrutura:
        a.yaml  → 1 documento
        b.yml   → 2 documentos
        c.json  → 1 documento
        notes.txt → ignorado (extensão não reconhecida)
    """
    (tmp_path / "a.yaml").write_text(
        "apiVersion: v1\nkind: ConfigMap\nmetadata:\n  name: a\n", encoding="utf-8"
    )
    (tmp_path / "b.yml").write_text(
        "apiVersion: v1\nkind: ConfigMap\nmetadata:\n  name: b1\n"
        "---\n"
        "apiVersion: v1\nkind: ConfigMap\nmetadata:\n  name: b2\n",
        encoding="utf-8",
    )
    (tmp_path / "c.json").write_text(
        '{"apiVersion": "v1", "kind": "ConfigMap", "metadata": {"name": "c"}}\n',
        encoding="utf-8",
    )
    (tmp_path / "notes.txt").write_text("not a manifest\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def ctx() -> HandlerContext:
    return HandlerContext()


@pytest.fixture
def client() -> InMemoryClient:
    return InMemoryClient()

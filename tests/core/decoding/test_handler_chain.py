# tests/core/decoding/test_handler_chain.py
"""
Testes da cadeia de handlers e dos combinadores de composição.

Este módulo valida que:
- create/update/delete delegam ao Resource Client com as opções informadas
- `get_handler` entrega ao handler envelopado o objeto *vivo*
- `ignore_error_handler` engole apenas falhas que casam com o predicado
- `chain_handlers` executa em ordem e para na primeira falha
- re-executar um create tolerante a "already exists" não produz erros

Invariantes:
    - Handlers são closures com assinatura uniforme (ctx, obj)
    - Nenhum combinador re-tenta chamadas ao client
"""

import io

import pytest

from manifest_decoder.core.client import (
    AlreadyExistsError,
    NotFoundError,
    ResourceClient,
    is_already_exists,
    is_not_found,
)
from manifest_decoder.core.decoding.decoder import decode_each
from manifest_decoder.core.decoding.handlers import (
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
from manifest_decoder.core.exceptions import HandlerError
from manifest_decoder.core.objects import ConfigMap, Unstructured


def _configmap(name="cfg", namespace="default", **data) -> ConfigMap:
    cm = ConfigMap(data=data)
    cm.name, cm.namespace = name, namespace
    return cm


def test_in_memory_client_satisfies_protocol(client):
    assert isinstance(client, ResourceClient)


def test_client_handlers_forward_options(ctx, client):
    cm = _configmap()

    create_handler(client, dry_run=True)(ctx, cm)
    update_handler(client)(ctx, cm)
    delete_handler(client, propagation="Foreground")(ctx, cm)

    assert [c[0] for c in client.calls] == ["create", "update", "delete"]
    assert client.options == [{"dry_run": True}, {}, {"propagation": "Foreground"}]
    assert client.store == {}


def test_get_handler_passes_live_object(ctx, client):
    """
    O handler envelopado recebe o estado vivo do backend, não o objeto
    decodificado.
    """
    client.seed(_configmap(mode="live"))
    seen = []

    wrapped = get_handler(client, lambda c, obj: seen.append(obj))
    wrapped(ctx, _configmap(mode="decoded"))

    assert len(seen) == 1
    assert isinstance(seen[0], ConfigMap)
    assert seen[0].data == {"mode": "live"}


def test_get_handler_uses_unstructured_for_unknown_kind(ctx, client):
    widget = Unstructured(
        {"apiVersion": "example.io/v1", "kind": "Widget", "metadata": {"name": "w"}, "spec": {"v": 1}}
    )
    client.seed(widget)
    seen = []

    get_handler(client, lambda c, obj: seen.append(obj))(ctx, widget.deep_copy())

    assert isinstance(seen[0], Unstructured)
    assert seen[0].object["spec"] == {"v": 1}


def test_get_handler_propagates_not_found(ctx, client):
    with pytest.raises(NotFoundError):
        get_handler(client, noop_handler())(ctx, _configmap())


def test_ignore_error_handler_swallows_only_matching_errors(ctx, client):
    cm = _configmap()
    client.seed(cm)

    create_ignore_already_exists(client)(ctx, cm)
    assert ctx.events[-1]["message"] == "handler error ignored"
    assert ctx.events[-1]["error"] == "AlreadyExistsError"

    with pytest.raises(NotFoundError):
        ignore_error_handler(update_handler(client), is_already_exists)(ctx, _configmap(name="ghost"))


def test_delete_ignore_not_found(ctx, client):
    delete_ignore_not_found(client)(ctx, _configmap())
    assert client.calls == [("delete", "ConfigMap", "default", "cfg")]


def test_error_predicates_follow_cause_chain():
    try:
        try:
            raise AlreadyExistsError("exists")
        except AlreadyExistsError as inner:
            raise HandlerError("handler failed") from inner
    except HandlerError as outer:
        assert is_already_exists(outer)
        assert not is_not_found(outer)


def test_chain_stops_at_first_failure(ctx):
    calls = []

    def fail(c, obj):
        calls.append("fail")
        raise RuntimeError("stop")

    chained = chain_handlers(lambda c, o: calls.append("first"), fail, lambda c, o: calls.append("last"))

    with pytest.raises(RuntimeError):
        chained(ctx, _configmap())
    assert calls == ["first", "fail"]


def test_rerun_create_with_ignore_already_exists_has_no_errors(ctx, client, multi_doc_yaml):
    """
    Re-executar um create tolerante contra objetos já existentes produz
    zero erros e nenhum efeito colateral duplicado.
    """
    handler = create_ignore_already_exists(client)

    first = decode_each(ctx, io.StringIO(multi_doc_yaml), handler)
    snapshot = dict(client.store)
    second = decode_each(ctx, io.StringIO(multi_doc_yaml), handler)

    assert first == second == 3
    assert client.store == snapshot
    assert len(client.store) == 3
    ignored = [e for e in ctx.events if e["message"] == "handler error ignored"]
    assert len(ignored) == 3


def test_plain_create_rerun_fails_on_first_object(ctx, client, multi_doc_yaml):
    decode_each(ctx, io.StringIO(multi_doc_yaml), create_handler(client))

    with pytest.raises(HandlerError) as exc:
        decode_each(ctx, io.StringIO(multi_doc_yaml), create_handler(client))

    assert is_already_exists(exc.value)
    assert exc.value.details["name"] == "first"

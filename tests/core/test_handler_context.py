# tests/core/test_handler_context.py
"""
Testes do `HandlerContext`.

Valida identidade por chamada, cancelamento consultivo e o log
estruturado de eventos (run_id, level, message, timestamp + extras).
"""

import pytest

from manifest_decoder.core.context import HandlerContext
from manifest_decoder.core.exceptions import ContextCancelledError


def test_each_context_has_its_own_identity():
    a, b = HandlerContext(), HandlerContext()
    assert a.run_id != b.run_id
    assert a.events is not b.events


def test_log_appends_structured_event():
    ctx = HandlerContext(run_id="run-1")
    ctx.log(level="info", message="object handled", kind="ConfigMap", name="cfg")

    assert len(ctx.events) == 1
    event = ctx.events[0]
    assert event["run_id"] == "run-1"
    assert event["level"] == "info"
    assert event["message"] == "object handled"
    assert event["kind"] == "ConfigMap"
    assert event["name"] == "cfg"
    assert "timestamp" in event


def test_cancellation_is_advisory():
    """
    Cancelar o contexto apenas sinaliza; quem verifica é o handler.

    `raise_if_cancelled()` é silencioso antes do cancelamento e levanta
    `ContextCancelledError` depois.
    """
    ctx = HandlerContext()
    ctx.raise_if_cancelled()
    assert not ctx.cancelled

    ctx.cancel()

    assert ctx.cancelled
    with pytest.raises(ContextCancelledError):
        ctx.raise_if_cancelled()

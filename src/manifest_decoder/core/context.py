# src/manifest_decoder/core/context.py
"""
Contexto cancelável passado aos handlers.

Este módulo define o `HandlerContext`, a estrutura canônica entregue a
cada handler durante o dispatch por objeto (`decode_each`,
`decode_each_file`).

O HandlerContext consolida:
    - identidade da chamada (run_id, created_at)
    - sinal de cancelamento consultivo
    - log estruturado de eventos da chamada
    - metadados livres do chamador (`meta`)

Decisões arquiteturais:
    - O cancelamento é consultivo: handlers verificam `cancelled` ou chamam
      `raise_if_cancelled()`; o pipeline não aborta preemptivamente entre
      invocações
    - Eventos sempre incluem `run_id`, `level`, `message` e `timestamp`
    - Cada chamada possui seu próprio contexto (sem estado global)

Limites explícitos:
    - Não executa handlers
    - Não persiste eventos
"""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from .exceptions import ContextCancelledError


@dataclass
class HandlerContext:
    run_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    _cancel_event: threading.Event = field(default_factory=threading.Event, init=False, repr=False)

    # -----------------------------
    # Cancellation
    # -----------------------------
    def cancel(self) -> None:
        self._cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise ContextCancelledError("context cancelled", details={"run_id": self.run_id})

    # -----------------------------
    # Logging
    # -----------------------------
    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

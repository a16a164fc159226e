"""Web-facing observers for shopping-list events.

Subscribes to an EventBus and keeps a lightweight in-memory ring buffer of
user notices ("Producto eliminado", "Esta categoría ya existe.", ...) that the
web layer returns to polling clients.

Design:
  * Each notice gets an auto-increment integer id (cursor) so clients can
    request only newer ones (since=<last_id_seen>).
  * A MAX_EVENTS cap prevents unbounded memory growth.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone

from ecolista.utilities.constants import (
    MSG_PRODUCT_ADDED, MSG_QUANTITY_UPDATED, MSG_PRODUCT_UPDATED, MSG_PRODUCT_DELETED,
    MSG_CATEGORY_ADDED, MSG_CATEGORY_REMOVED,
)
from .Event_Bus import (
    EventBus, ALL_EVENTS, LIST_RELOADED, PRODUCT_UPSERTED, PRODUCT_UPDATED, PRODUCT_DELETED,
    CATEGORY_ADDED, CATEGORY_REMOVED, OPERATION_FAILED,
)

MAX_EVENTS = 300  # keep a few hundred recent notices


def _message(event_name: str, payload: Dict[str, Any]) -> str:
    if event_name == PRODUCT_UPSERTED:
        return MSG_QUANTITY_UPDATED if payload.get('action') == 'updated' else MSG_PRODUCT_ADDED
    if event_name == PRODUCT_UPDATED:
        return MSG_PRODUCT_UPDATED
    if event_name == PRODUCT_DELETED:
        return MSG_PRODUCT_DELETED
    if event_name == CATEGORY_ADDED:
        return MSG_CATEGORY_ADDED
    if event_name == CATEGORY_REMOVED:
        return MSG_CATEGORY_REMOVED
    if event_name == OPERATION_FAILED:
        return payload.get('error', '')
    if event_name == LIST_RELOADED:
        return f"Mostrando {payload.get('count', 0)} productos"
    return ''


class NoticeLog:
    def __init__(self, max_events: int = MAX_EVENTS):
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self._max_events = max_events
        self._buses: List[EventBus] = []

    def record(self, event_name: str, payload: Any):  # signature expected by EventBus
        payload = payload if isinstance(payload, dict) else {}
        with self._lock:
            evt = {
                'id': self._next_id,
                'type': event_name,
                'level': 'error' if event_name == OPERATION_FAILED else 'success',
                'message': _message(event_name, payload),
                'ts': datetime.now(timezone.utc).isoformat(),
            }
            product = payload.get('product')
            if product is not None and hasattr(product, 'nombre_producto'):
                evt['nombre_producto'] = product.nombre_producto
                evt['categoria'] = product.categoria
                evt['product_id'] = product.id
            # 'id' stays the cursor; payload keys never shadow it
            for k in ('name', 'product_id', 'operation', 'count'):
                if k in payload:
                    evt[k] = payload[k]
            self._events.append(evt)
            self._next_id += 1
            # Trim buffer
            if len(self._events) > self._max_events:
                del self._events[: len(self._events) - self._max_events]

    def start(self, bus: EventBus):
        """Idempotent start: subscribe to every event of the bus once."""
        if bus in self._buses:
            return self
        bus.subscribe(ALL_EVENTS, self.record)
        self._buses.append(bus)
        return self

    def stop(self):
        for bus in self._buses:
            bus.unsubscribe(ALL_EVENTS, self.record)
        self._buses = []

    def get_events(self, since: Optional[int] = None) -> Dict[str, Any]:
        """Return notices newer than 'since' (exclusive), plus next_cursor for polling."""
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


__all__ = ['NoticeLog', 'MAX_EVENTS']

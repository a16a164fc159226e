"""Simple Event Bus / Observer implementation for shopping-list notices.

Event names:
  list.reloaded     -> payload {"count": int}
  product.upserted  -> payload {"product": Product, "action": "inserted" | "updated"}
  product.updated   -> payload {"product": Product}
  product.deleted   -> payload {"product_id": str}
  category.added    -> payload {"name": str}
  category.removed  -> payload {"name": str}
  operation.failed  -> payload {"operation": str, "error": str}

Subscribers are callables taking (event_name, payload). Only the names above
are accepted; subscribing to anything else is a programming error.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Iterable, List, Tuple, Union

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
LIST_RELOADED = "list.reloaded"
PRODUCT_UPSERTED = "product.upserted"
PRODUCT_UPDATED = "product.updated"
PRODUCT_DELETED = "product.deleted"
CATEGORY_ADDED = "category.added"
CATEGORY_REMOVED = "category.removed"
OPERATION_FAILED = "operation.failed"

ALL_EVENTS = (
	LIST_RELOADED, PRODUCT_UPSERTED, PRODUCT_UPDATED, PRODUCT_DELETED,
	CATEGORY_ADDED, CATEGORY_REMOVED, OPERATION_FAILED,
)

Listener = Callable[[str, Any], None]


def _names(event_names: Union[str, Iterable[str]]) -> Tuple[str, ...]:
	names = (event_names,) if isinstance(event_names, str) else tuple(event_names)
	unknown = [n for n in names if n not in ALL_EVENTS]
	if unknown:
		raise ValueError(f"Unknown shopping-list event(s): {', '.join(unknown)}")
	return names


class EventBus:
	"""Routes controller outcomes to listeners by event name.

	``subscribe``/``unsubscribe`` accept one name or several, so an observer
	can follow the whole list lifecycle with a single call.
	"""

	def __init__(self):
		self._listeners: Dict[str, List[Listener]] = {name: [] for name in ALL_EVENTS}

	def subscribe(self, event_names: Union[str, Iterable[str]], callback: Listener):
		for name in _names(event_names):
			if callback not in self._listeners[name]:
				self._listeners[name].append(callback)

	def unsubscribe(self, event_names: Union[str, Iterable[str]], callback: Listener):
		for name in _names(event_names):
			if callback in self._listeners[name]:
				self._listeners[name].remove(callback)

	def listener_count(self, event_name: str) -> int:
		return len(self._listeners.get(event_name, ()))

	def publish(self, event_name: str, payload: Any):
		if event_name not in self._listeners:
			logger.warning("Dropping unknown event %s", event_name)
			return
		for cb in list(self._listeners[event_name]):
			try:
				cb(event_name, payload)
			except Exception:
				# A broken listener must not fail the operation that published
				logger.exception("Error delivering %s to %s", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'ALL_EVENTS',
	'LIST_RELOADED', 'PRODUCT_UPSERTED', 'PRODUCT_UPDATED', 'PRODUCT_DELETED',
	'CATEGORY_ADDED', 'CATEGORY_REMOVED', 'OPERATION_FAILED',
]

"""Event helper utilities.

Small publishing helpers so the logic layer does not build payloads by hand.
Every helper takes the bus to publish on; the controller passes its own.

Quick import:
    from ecolista.events.event_helpers import (
        publish_reloaded, publish_upserted, publish_updated, publish_deleted,
        publish_category_added, publish_category_removed, publish_failure
    )
"""
from __future__ import annotations
from typing import Any

from .Event_Bus import (
    EventBus, LIST_RELOADED, PRODUCT_UPSERTED, PRODUCT_UPDATED, PRODUCT_DELETED,
    CATEGORY_ADDED, CATEGORY_REMOVED, OPERATION_FAILED,
)

__all__ = [
    'publish_reloaded', 'publish_upserted', 'publish_updated', 'publish_deleted',
    'publish_category_added', 'publish_category_removed', 'publish_failure',
]


def publish_reloaded(bus: EventBus, count: int):
    bus.publish(LIST_RELOADED, {'count': count})


def publish_upserted(bus: EventBus, product: Any, action: str):
    """Publish a product.upserted event ('inserted' or 'updated')."""
    bus.publish(PRODUCT_UPSERTED, {'product': product, 'action': action})


def publish_updated(bus: EventBus, product: Any):
    bus.publish(PRODUCT_UPDATED, {'product': product})


def publish_deleted(bus: EventBus, product_id: str):
    bus.publish(PRODUCT_DELETED, {'product_id': product_id})


def publish_category_added(bus: EventBus, name: str):
    bus.publish(CATEGORY_ADDED, {'name': name})


def publish_category_removed(bus: EventBus, name: str):
    bus.publish(CATEGORY_REMOVED, {'name': name})


def publish_failure(bus: EventBus, operation: str, error: Exception):
    """Publish an operation.failed event carrying the error message shown to the user."""
    bus.publish(OPERATION_FAILED, {
        'operation': operation,
        'error': str(error),
        'kind': type(error).__name__,
    })

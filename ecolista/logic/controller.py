"""Shopping-list controller: the operations the screens call.

Owns the ListState and the category registry, runs the store calls and
publishes a notice for every outcome. Views are recomputed from the state on
each access, never cached.

State transitions:
  filter_by_category("")   -> all
  filter_by_category(cat)  -> category(cat)
  search(text)             -> query(text) / all, once the text settles
  show_frequent()          -> frequent
  reload                   -> same mode on fresh rows; frequent falls back to all
"""
import logging
from typing import Any, Dict, List, Optional

from ecolista.domain.errors import EcoListaError, RemoteError
from ecolista.domain.ListState import ListState
from ecolista.domain.Product import Product
from ecolista.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from ecolista.events.event_helpers import (
    publish_reloaded, publish_upserted, publish_updated, publish_deleted,
    publish_category_added, publish_category_removed, publish_failure,
)
from ecolista.infra.Store_Repository import StoreRepository
from ecolista.logic.catalog.registry import CategoryRegistry
from ecolista.logic.products.editing import delete_product as _delete_product, save_edit as _save_edit
from ecolista.logic.products.upsert import UpsertResult, upsert_product as _upsert_product
from ecolista.logic.query.debounce import Debouncer
from ecolista.logic.query.views import compute_view
from ecolista.utilities.config import SEARCH_DEBOUNCE_MS
from ecolista.utilities.constants import (
    ALL_PRODUCTS, ORDER_FIELD, MSG_LOAD_FAILED, VIEW_ALL, VIEW_CATEGORY, VIEW_QUERY, VIEW_FREQUENT,
)

logger = logging.getLogger(__name__)


class ListController:
    def __init__(self, store: StoreRepository, event_bus: Optional[EventBus] = None,
                 debounce_ms: int = SEARCH_DEBOUNCE_MS):
        self.store = store
        self.state = ListState()
        self.categories = CategoryRegistry(store)
        self._event_bus = event_bus or GLOBAL_EVENT_BUS
        self._debouncer = Debouncer(self._apply_search, debounce_ms)

    # --- Observer helpers -------------------------------------------------
    def _fail(self, operation: str, error: EcoListaError):
        logger.error("%s failed: %s", operation, error)
        publish_failure(self._event_bus, operation, error)

    # --- Views ------------------------------------------------------------
    @property
    def view(self) -> List[Product]:
        return compute_view(self.state.rows, self.state.view_mode, self.state.view_arg)

    def snapshot(self) -> Dict[str, Any]:
        '''Serializable picture of what the list screen shows.'''
        items = self.view
        return {
            'mode': self.state.view_mode,
            'argument': self.state.view_arg,
            'query_text': self.state.query_text,
            'loading': self.state.loading,
            'history_visible': self.state.history_visible,
            'count': len(items),
            'items': [p.to_dict() for p in items],
        }

    def filter_by_category(self, categoria: str = ALL_PRODUCTS) -> List[Product]:
        self._debouncer.cancel()
        self.state.query_text = ""
        if categoria == ALL_PRODUCTS:
            self.state.set_view(VIEW_ALL)
        else:
            self.state.set_view(VIEW_CATEGORY, categoria)
        self.state.history_visible = True
        return self.view

    def search(self, text: str):
        """Record a keystroke; the view changes only once the text settles."""
        self.state.query_text = text or ""
        return self._debouncer.schedule(self.state.query_text)

    def _apply_search(self, text: str):
        if text:
            self.state.set_view(VIEW_QUERY, text)
            self.state.history_visible = True
        else:
            self.state.set_view(VIEW_ALL)
        logger.debug("Search settled on %r (%s rows)", text, len(self.view))

    def show_frequent(self) -> List[Product]:
        self._debouncer.cancel()
        self.state.query_text = ""
        self.state.set_view(VIEW_FREQUENT)
        self.state.history_visible = True
        return self.view

    def toggle_history(self) -> bool:
        self.state.history_visible = not self.state.history_visible
        return self.state.history_visible

    # --- Loading ----------------------------------------------------------
    async def load_all(self) -> List[Product]:
        """Fetch every row (newest purchase first) and replace the snapshot."""
        self.state.loading = True
        try:
            rows = await self.store.select(order=ORDER_FIELD, descending=True)
        except RemoteError as e:
            error = RemoteError(MSG_LOAD_FAILED)
            self._fail('load_all', error)
            raise error from e
        finally:
            self.state.loading = False

        self.state.replace_rows(Product.from_dict(r) for r in rows)
        self.categories.sync(self.state.rows)
        if self.state.view_mode == VIEW_FREQUENT:
            self.state.set_view(VIEW_ALL)
        publish_reloaded(self._event_bus, len(self.state.rows))
        return self.view

    async def _run(self, operation: str, coro):
        self.state.loading = True
        try:
            return await coro
        except EcoListaError as e:
            self._fail(operation, e)
            raise
        finally:
            self.state.loading = False

    async def _reload_after(self, operation: str):
        """Reload once a write has committed. A failed reload is reported by
        load_all itself and never turns the committed write into a failure."""
        try:
            await self.load_all()
        except RemoteError:
            logger.warning("Reload after %s failed; list left stale until the next load", operation)

    # --- Mutations --------------------------------------------------------
    async def upsert_product(self, candidate) -> UpsertResult:
        result = await self._run('upsert_product', _upsert_product(self.store, candidate))
        publish_upserted(self._event_bus, result.product, result.action)
        await self._reload_after('upsert_product')
        return result

    async def add_category(self, name: str) -> str:
        category = await self._run('add_category', self.categories.add(name))
        publish_category_added(self._event_bus, category)
        return category

    async def remove_category(self, name: str) -> str:
        category = await self._run('remove_category', self.categories.remove(name))
        publish_category_removed(self._event_bus, category)
        await self._reload_after('remove_category')
        return category

    async def save_edit(self, product) -> Product:
        saved = await self._run('save_edit', _save_edit(self.store, product))
        publish_updated(self._event_bus, saved)
        await self._reload_after('save_edit')
        return saved

    async def delete_product(self, product_id: str):
        await self._run('delete_product', _delete_product(self.store, product_id))
        publish_deleted(self._event_bus, product_id)
        await self._reload_after('delete_product')

    # --- Teardown ---------------------------------------------------------
    def close(self):
        '''Cancel the pending search recompute; nothing fires afterwards.'''
        self._debouncer.close()


__all__ = ['ListController']

"""Category registry.

Categories are not a table of their own: the registry is the distinct set of
``categoria`` values found in the product rows. A category with no products
yet is kept alive by a placeholder row (empty name, cantidad 0).
"""
import logging
from typing import Iterable, List

from ecolista.domain.errors import DuplicateError
from ecolista.domain.Product import Product
from ecolista.infra.Store_Repository import StoreRepository
from ecolista.utilities.constants import MSG_CATEGORY_EXISTS, MSG_EMPTY_CATEGORY
from ecolista.utilities.validators import CategoryInput, parse_input

logger = logging.getLogger(__name__)


def list_categories(rows: Iterable) -> List[str]:
    """Distinct, non-empty categoria values in first-encounter order.

    Accepts Product objects or raw store rows.
    """
    seen = []
    for r in rows:
        name = r.get('categoria') if isinstance(r, dict) else getattr(r, 'categoria', '')
        if name and name not in seen:
            seen.append(name)
    return seen


class CategoryRegistry:
    def __init__(self, store: StoreRepository):
        self.store = store
        self.names: List[str] = []

    def __contains__(self, name: str) -> bool:
        return name in self.names

    def sync(self, rows: Iterable):
        '''Rebuild the local view from an already loaded snapshot.'''
        self.names = list_categories(rows)
        return self.names

    async def refresh(self) -> List[str]:
        '''Rebuild the local view from the store, fetching only the categoria column.'''
        rows = await self.store.select(columns="categoria")
        return self.sync(rows)

    async def add(self, name: str) -> str:
        """Register a new category by persisting a placeholder row.

        Raises ValidationError for a blank name and DuplicateError when the
        store already holds a row with that categoria.
        """
        category = parse_input(CategoryInput, {'name': name}, MSG_EMPTY_CATEGORY).name
        existing = await self.store.select(filters={'categoria': category}, columns="categoria")
        if existing:
            raise DuplicateError(MSG_CATEGORY_EXISTS)

        await self.store.insert(Product.placeholder(category).to_insert_row())
        if category not in self.names:
            self.names.append(category)
        logger.info("Category added: %s", category)
        return category

    async def remove(self, name: str) -> str:
        """Delete every row carrying ``name``, real products included.

        A blank name raises ValidationError before the store is touched. The
        name is matched verbatim. On store failure the RemoteError propagates
        and the local view is left untouched; callers reload to resync.
        """
        parse_input(CategoryInput, {'name': name}, MSG_EMPTY_CATEGORY)
        await self.store.delete({'categoria': name})
        self.names = [c for c in self.names if c != name]
        logger.info("Category removed with its products: %s", name)
        return name


__all__ = ['list_categories', 'CategoryRegistry']

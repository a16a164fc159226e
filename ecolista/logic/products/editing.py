"""Store writes behind the edit and delete actions of the product list."""
import logging
from typing import Any, Dict, Union

from ecolista.domain.Product import Product
from ecolista.infra.Store_Repository import StoreRepository
from ecolista.utilities.constants import EDITABLE_FIELDS
from ecolista.utilities.validators import ProductEditInput, parse_input

logger = logging.getLogger(__name__)


async def save_edit(store: StoreRepository, product: Union[Product, ProductEditInput, Dict[str, Any]]) -> Product:
    """Overwrite the editable fields of the row identified by ``product.id``.

    frecuencia is never sent. A missing row surfaces as RemoteError.
    """
    data = product.to_dict() if isinstance(product, Product) else product
    item = parse_input(ProductEditInput, data)
    patch = {field: getattr(item, field) for field in EDITABLE_FIELDS}
    row = await store.update(item.id, patch)
    logger.info("Product %s saved", item.id)
    return Product.from_dict(row)


async def delete_product(store: StoreRepository, product_id: str):
    await store.delete({'id': product_id})
    logger.info("Product %s deleted", product_id)


__all__ = ['save_edit', 'delete_product']

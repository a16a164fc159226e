"""Find-or-create for products keyed by (nombre_producto, categoria).

A candidate matching an existing row only adds its cantidad to that row; the
existing descriptive fields win. Otherwise a new row is inserted.

The lookup and the write are two separate store calls, so two writers racing
on the same key can both insert. Single-user use is assumed.
"""
import logging
from typing import Any, Dict, Union

from ecolista.domain.Product import Product
from ecolista.infra.Store_Repository import StoreRepository
from ecolista.utilities.validators import ProductInput, parse_input

logger = logging.getLogger(__name__)

INSERTED = "inserted"
UPDATED = "updated"


class UpsertResult:
    def __init__(self, action: str, product: Product):
        self.action = action
        self.product = product

    @property
    def inserted(self) -> bool:
        return self.action == INSERTED

    def __str__(self) -> str:
        return f"UpsertResult {self.action}: {self.product}"

    __repr__ = __str__


async def upsert_product(store: StoreRepository, candidate: Union[ProductInput, Dict[str, Any]]) -> UpsertResult:
    """Merge the candidate into a matching row or insert it.

    Raises ValidationError when a required field is blank and RemoteError on
    any store failure.
    """
    item = parse_input(ProductInput, candidate)

    matches = await store.select(filters={
        'nombre_producto': item.nombre_producto,
        'categoria': item.categoria,
    })
    if matches:
        existing = Product.from_dict(matches[0])
        new_quantity = existing.cantidad + item.cantidad
        row = await store.update(existing.id, {'cantidad': new_quantity})
        product = Product.from_dict(row)
        logger.info("Merged %s into %s (cantidad %s -> %s)", item.cantidad, existing.id,
                    existing.cantidad, new_quantity)
        return UpsertResult(UPDATED, product)

    new_product = Product(
        nombre_producto=item.nombre_producto,
        categoria=item.categoria,
        impacto_ambiental=item.impacto_ambiental,
        sugerencia_sostenible=item.sugerencia_sostenible,
        cantidad=item.cantidad,
        frecuencia=0,
    )
    row = await store.insert(new_product.to_insert_row())
    product = Product.from_dict(row)
    logger.info("Inserted product %s in %s", product.nombre_producto, product.categoria)
    return UpsertResult(INSERTED, product)


__all__ = ['UpsertResult', 'upsert_product', 'INSERTED', 'UPDATED']

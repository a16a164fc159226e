"""Product domain entity: one row of the shopping-list table."""
from typing import Optional

from ecolista.utilities.constants import (
    DEFAULT_LIST_NAME, DEFAULT_QUANTITY, PLACEHOLDER_QUANTITY, PRODUCT_FIELDS
)


def _as_int(value, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class Product:
    def __init__(self, nombre_producto: str = "", categoria: str = "", impacto_ambiental: str = "",
                 sugerencia_sostenible: str = "", cantidad: int = DEFAULT_QUANTITY, frecuencia: int = 0,
                 id: Optional[str] = None, fecha_compra: Optional[str] = None,
                 nombre_lista: str = DEFAULT_LIST_NAME):
        self.id = id
        self.nombre_producto = nombre_producto
        self.categoria = categoria
        self.impacto_ambiental = impacto_ambiental
        self.sugerencia_sostenible = sugerencia_sostenible
        self.cantidad = cantidad
        self.frecuencia = frecuencia
        self.fecha_compra = fecha_compra
        self.nombre_lista = nombre_lista

    @classmethod
    def placeholder(cls, categoria: str) -> "Product":
        '''Row that only registers a category name before any real product exists in it.'''
        return cls(categoria=categoria, cantidad=PLACEHOLDER_QUANTITY)

    @property
    def is_placeholder(self) -> bool:
        return (not self.nombre_producto and not self.impacto_ambiental
                and not self.sugerencia_sostenible and self.cantidad == PLACEHOLDER_QUANTITY)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    # Mutable and compared by value: not usable as a dict key or set member
    __hash__ = None

    def __str__(self) -> str:
        return f"{self.nombre_producto or '-'} [{self.categoria}] x{self.cantidad}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a Product from a store row. Ignores unknown keys, fills missing ones.'''
        d = dict(data) if isinstance(data, dict) else {}
        filtered = {k: v for k, v in d.items() if k in PRODUCT_FIELDS}
        for key in ("nombre_producto", "categoria", "impacto_ambiental", "sugerencia_sostenible"):
            filtered[key] = filtered.get(key) or ""
        filtered["cantidad"] = _as_int(filtered.get("cantidad"), 0)
        filtered["frecuencia"] = _as_int(filtered.get("frecuencia"), 0)
        if filtered.get("id") is not None:
            filtered["id"] = str(filtered["id"])
        filtered.setdefault("nombre_lista", DEFAULT_LIST_NAME)
        return Product(**filtered)

    def to_dict(self):
        '''Converts the Product to its wire shape.'''
        return {
            "id": self.id,
            "nombre_producto": self.nombre_producto,
            "categoria": self.categoria,
            "impacto_ambiental": self.impacto_ambiental,
            "sugerencia_sostenible": self.sugerencia_sostenible,
            "cantidad": self.cantidad,
            "frecuencia": self.frecuencia,
            "fecha_compra": self.fecha_compra,
            "nombre_lista": self.nombre_lista,
        }

    def to_insert_row(self):
        '''Wire shape without the store-assigned keys (id, fecha_compra).'''
        row = self.to_dict()
        row.pop("id")
        row.pop("fecha_compra")
        return row


class AggregatedProduct(Product):
    """Product annotated with the summed quantity of every row sharing its name (not persisted)."""

    def __init__(self, cantidad_total: int = 0, **fields):
        super().__init__(**fields)
        self.cantidad_total = cantidad_total

    @classmethod
    def from_product(cls, product: Product, cantidad_total: int) -> "AggregatedProduct":
        fields = product.to_dict()
        return cls(cantidad_total=cantidad_total, **fields)

    def __str__(self) -> str:
        return f"{self.nombre_producto or '-'} total={self.cantidad_total}"

    __repr__ = __str__

    def to_dict(self):
        d = super().to_dict()
        d["cantidad_total"] = self.cantidad_total
        return d

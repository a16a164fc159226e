"""Derived views of the product list.

Every function here is pure: it takes the loaded row snapshot (already in
store order, newest purchase first) and returns a new list. Relative order of
the snapshot is preserved unless a function says otherwise.
"""
from typing import Dict, List, Optional, Sequence

from ecolista.domain.Product import AggregatedProduct, Product
from ecolista.utilities.constants import (
    ALL_PRODUCTS, VIEW_ALL, VIEW_CATEGORY, VIEW_QUERY, VIEW_FREQUENT
)


def _normalize(text: str) -> str:
    return (text or '').lower()


def filter_by_category(rows: Sequence[Product], categoria: str) -> List[Product]:
    """Rows whose categoria equals ``categoria`` exactly; "" returns every row."""
    if categoria == ALL_PRODUCTS:
        return list(rows)
    return [p for p in rows if p.categoria == categoria]


def search_rows(rows: Sequence[Product], text: str) -> List[Product]:
    """Case-insensitive substring match on nombre_producto or categoria."""
    if not text:
        return list(rows)
    query = _normalize(text)
    return [
        p for p in rows
        if query in _normalize(p.nombre_producto) or query in _normalize(p.categoria)
    ]


def frequent_products(rows: Sequence[Product]) -> List[AggregatedProduct]:
    """Group rows by nombre_producto and rank groups by summed cantidad.

    The first row met for a name represents its group. The sort is stable, so
    groups with the same total keep the order in which they were first met.
    Ranking uses ``cantidad``, not ``frecuencia``.
    """
    totals: Dict[str, int] = {}
    representative: Dict[str, Product] = {}
    for p in rows:
        if p.nombre_producto not in representative:
            representative[p.nombre_producto] = p
            totals[p.nombre_producto] = 0
        totals[p.nombre_producto] += p.cantidad

    grouped = [AggregatedProduct.from_product(representative[name], totals[name]) for name in representative]
    grouped.sort(key=lambda a: a.cantidad_total, reverse=True)
    return grouped


def compute_view(rows: Sequence[Product], mode: str, arg: Optional[str] = None) -> List[Product]:
    """Dispatch on the view mode of the list state."""
    if mode == VIEW_ALL:
        return list(rows)
    if mode == VIEW_CATEGORY:
        return filter_by_category(rows, arg or ALL_PRODUCTS)
    if mode == VIEW_QUERY:
        return search_rows(rows, arg or '')
    if mode == VIEW_FREQUENT:
        return frequent_products(rows)
    raise ValueError(f"Unknown view mode: {mode}")


__all__ = ['filter_by_category', 'search_rows', 'frequent_products', 'compute_view']

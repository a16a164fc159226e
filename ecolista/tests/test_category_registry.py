import pytest

from ecolista.domain.errors import DuplicateError, RemoteError, ValidationError
from ecolista.domain.Product import Product
from ecolista.logic.catalog.registry import CategoryRegistry, list_categories


def test_list_categories_distinct_non_empty():
    rows = [
        Product("Jabón", "Limpieza"), Product("Arroz", "Granos"),
        {"categoria": "Limpieza"}, {"categoria": ""}, {"categoria": None},
    ]
    assert list_categories(rows) == ["Limpieza", "Granos"]


@pytest.mark.asyncio
async def test_refresh_reads_only_categoria_column(store):
    registry = CategoryRegistry(store)
    assert await registry.refresh() == ["Limpieza", "Granos"]


@pytest.mark.asyncio
async def test_add_persists_placeholder(store, stored_rows):
    registry = CategoryRegistry(store)
    await registry.refresh()

    assert await registry.add("Lácteos") == "Lácteos"
    assert registry.names == ["Limpieza", "Granos", "Lácteos"]
    placeholder = next(r for r in stored_rows() if r["categoria"] == "Lácteos")
    assert placeholder["nombre_producto"] == ""
    assert placeholder["cantidad"] == 0
    assert placeholder["frecuencia"] == 0


@pytest.mark.asyncio
async def test_add_blank_name_rejected(store):
    with pytest.raises(ValidationError):
        await CategoryRegistry(store).add("   ")
    assert store.calls == []


@pytest.mark.asyncio
async def test_duplicate_checked_against_store(store, stored_rows):
    # Empty local view: the collision must still be found in the store
    registry = CategoryRegistry(store)
    with pytest.raises(DuplicateError):
        await registry.add("Granos")
    assert len(stored_rows()) == 3


@pytest.mark.asyncio
async def test_remove_cascades_to_products(store, stored_rows):
    registry = CategoryRegistry(store)
    await registry.refresh()

    await registry.remove("Limpieza")

    assert [r["id"] for r in stored_rows()] == ["p3"]
    assert "Limpieza" not in registry
    assert await registry.refresh() == ["Granos"]


@pytest.mark.asyncio
async def test_remove_failure_leaves_view_stale(store, stored_rows):
    registry = CategoryRegistry(store)
    await registry.refresh()
    store.fail_on = {"delete"}

    with pytest.raises(RemoteError):
        await registry.remove("Limpieza")
    assert registry.names == ["Limpieza", "Granos"]
    assert len(stored_rows()) == 3


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["", "   "])
async def test_remove_blank_name_rejected(store, stored_rows, name):
    registry = CategoryRegistry(store)
    await registry.refresh()
    store.calls.clear()

    with pytest.raises(ValidationError):
        await registry.remove(name)
    assert store.calls == []
    assert len(stored_rows()) == 3

from fastapi import APIRouter, Body, Depends, Query

from ecolista.api.dependencies import get_controller
from ecolista.logic.controller import ListController

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("")
async def list_categories(refresh: bool = Query(default=False), controller: ListController = Depends(get_controller)):
    """Known categories; refresh=true re-reads them from the store first."""
    if refresh:
        await controller.categories.refresh()
    return {"categories": list(controller.categories.names)}


@router.post("")
async def add_category(name: str = Body("", embed=True), controller: ListController = Depends(get_controller)):
    category = await controller.add_category(name)
    return {"status": "added", "name": category, "categories": list(controller.categories.names)}


@router.delete("/{name}")
async def remove_category(name: str, controller: ListController = Depends(get_controller)):
    # Cascades: every product of the category goes with it
    removed = await controller.remove_category(name)
    return {"status": "removed", "name": removed, "categories": list(controller.categories.names)}

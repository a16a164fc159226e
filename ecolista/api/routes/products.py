from fastapi import APIRouter, Depends

from ecolista.api.dependencies import get_controller
from ecolista.logic.controller import ListController

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
def current_view(controller: ListController = Depends(get_controller)):
    """Rows of the current view plus the state the screen needs to render them."""
    return controller.snapshot()


@router.post("/reload")
async def reload_products(controller: ListController = Depends(get_controller)):
    await controller.load_all()
    return controller.snapshot()


@router.post("")
async def add_product(payload: dict, controller: ListController = Depends(get_controller)):
    # Raw dict so blank fields reach the domain validator (400 with the form message)
    result = await controller.upsert_product(payload)
    return {"status": result.action, "product": result.product.to_dict()}


@router.put("/{product_id}")
async def edit_product(product_id: str, payload: dict, controller: ListController = Depends(get_controller)):
    saved = await controller.save_edit({**payload, "id": product_id})
    return {"status": "updated", "product": saved.to_dict()}


@router.delete("/{product_id}")
async def remove_product(product_id: str, controller: ListController = Depends(get_controller)):
    await controller.delete_product(product_id)
    return {"status": "deleted", "id": product_id}

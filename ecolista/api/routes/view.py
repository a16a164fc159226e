from typing import Optional

from fastapi import APIRouter, Depends, Query

from ecolista.api.dependencies import get_controller, get_notices
from ecolista.events.web_observers import NoticeLog
from ecolista.logic.controller import ListController
from ecolista.utilities.validators import CategorySelectInput, SearchInput

router = APIRouter(prefix="/api", tags=["view"])


@router.post("/view/category")
async def select_category(payload: CategorySelectInput, controller: ListController = Depends(get_controller)):
    controller.filter_by_category(payload.categoria)
    return controller.snapshot()


@router.post("/view/search")
async def type_search(payload: SearchInput, controller: ListController = Depends(get_controller)):
    """Forward a keystroke; the view follows once the text has settled."""
    controller.search(payload.text)
    return {"scheduled": True, "query_text": controller.state.query_text}


@router.post("/view/frequent")
async def select_frequent(controller: ListController = Depends(get_controller)):
    controller.show_frequent()
    return controller.snapshot()


@router.post("/view/history")
def toggle_history(controller: ListController = Depends(get_controller)):
    return {"history_visible": controller.toggle_history()}


@router.get("/notices")
def notices(since: Optional[int] = Query(default=None), log: NoticeLog = Depends(get_notices)):
    """Success/error notices newer than `since` (poll with the returned next_cursor)."""
    return log.get_events(since)

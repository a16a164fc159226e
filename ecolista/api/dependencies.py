from fastapi import Request

from ecolista.events.web_observers import NoticeLog
from ecolista.logic.controller import ListController


def get_controller(request: Request) -> ListController:
    """Controller created by the app lifespan (one list per process)."""
    return request.app.state.controller


def get_notices(request: Request) -> NoticeLog:
    return request.app.state.notices

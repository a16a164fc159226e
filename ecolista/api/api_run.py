from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ecolista.domain.errors import DuplicateError, EcoListaError, RemoteError, ValidationError
from ecolista.events.Event_Bus import EventBus
from ecolista.events.web_observers import NoticeLog
from ecolista.infra.store_factory import create_store
from ecolista.infra.Store_Repository import StoreRepository
from ecolista.logic.controller import ListController
from ecolista.utilities.config import DEBUG, SEARCH_DEBOUNCE_MS

# Routers
from ecolista.api.routes import categories, products, view

# Logging
logger = logging.getLogger("ecolista_app")

ERROR_STATUS = {
    ValidationError: 400,
    DuplicateError: 409,
    RemoteError: 502,
}


def create_app(store: Optional[StoreRepository] = None, debounce_ms: int = SEARCH_DEBOUNCE_MS) -> FastAPI:
    """Build the API. A store can be injected (tests); otherwise STORE_BACKEND decides."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app_store = store or create_store()
        bus = EventBus()
        notices = NoticeLog().start(bus)
        controller = ListController(app_store, event_bus=bus, debounce_ms=debounce_ms)
        app.state.controller = controller
        app.state.notices = notices
        try:
            await controller.load_all()
            logger.info("Loaded %s products", len(controller.state.rows))
        except RemoteError as e:
            # Start anyway; the client can retry with /api/products/reload
            logger.error("Initial load failed: %s", e)

        yield

        controller.close()
        notices.stop()
        await app_store.aclose()
        logger.info("Store closed")

    app = FastAPI(title="EcoLista API", debug=DEBUG, lifespan=lifespan)

    @app.exception_handler(EcoListaError)
    async def _domain_error(request: Request, exc: EcoListaError):
        status = ERROR_STATUS.get(type(exc), 500)
        return JSONResponse(status_code=status, content={"error": str(exc), "kind": type(exc).__name__})

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(products.router)
    app.include_router(categories.router)
    app.include_router(view.router)
    return app


app = create_app()

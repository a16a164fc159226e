import logging

from ecolista.infra.paths import PRODUCTS_FILE
from ecolista.infra.Rest_Store import RestStoreRepository
from ecolista.infra.Store_Repository import JsonStoreRepository, StoreRepository
from ecolista.utilities import config

logger = logging.getLogger(__name__)


def create_store(backend: str = None) -> StoreRepository:
    """Build the store adapter selected by STORE_BACKEND ("rest" or "json")."""
    backend = (backend or config.STORE_BACKEND).lower()
    if backend == "rest":
        logger.info("Using Supabase store at %s (table %s)", config.SUPABASE_URL, config.PRODUCTS_TABLE)
        return RestStoreRepository(
            config.SUPABASE_URL, config.SUPABASE_KEY,
            table=config.PRODUCTS_TABLE, timeout=config.STORE_TIMEOUT_SECONDS,
        )
    if backend == "json":
        logger.info("Using JSON store at %s", PRODUCTS_FILE)
        return JsonStoreRepository(PRODUCTS_FILE, table=config.PRODUCTS_TABLE)
    raise ValueError(f"Unknown STORE_BACKEND: {backend}")

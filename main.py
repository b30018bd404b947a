# ===== Part 1: Imports & Logging ============================================
import logging
from typing import Optional

from fastapi import FastAPI

import modules.admin as admin
import modules.directory as directory
from modules.admin import AdminAccountRepository, AdminAuthService
from modules.directory import DirectoryService, EntityStore
from utils.app_settings import Settings, load_settings
from utils.timefmt import make_clock

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


# ===== Part 2: Application factory ===========================================
def create_app(settings: Optional[Settings] = None, store: Optional[EntityStore] = None) -> FastAPI:
    """Wire the store, services and routers into a FastAPI application.

    A fresh in-memory store is created (and seeded, unless disabled) when
    none is passed in; each application instance owns its own collections.
    """

    settings = settings or load_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO), format=LOG_FORMAT)

    if store is None:
        store = EntityStore(rating_policy=settings.rating_policy)
        if settings.seed:
            directory.seed.seed(store)

    app = FastAPI(title="Медицинские учреждения Гродно")
    app.state.settings = settings
    app.state.directory_service = DirectoryService(
        store,
        page_size=settings.page_size,
        clock=make_clock(settings.timezone),
    )
    app.state.admin_auth = AdminAuthService(AdminAccountRepository(settings.admin_store))

    directory.register_api(app)
    admin.register_api(app)
    logger.info(
        "Directory ready: %d institutions, page size %d, rating policy %s",
        len(store.institutions),
        settings.page_size,
        settings.rating_policy,
    )
    return app


# ===== Part 3: Entry point ====================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(), host="127.0.0.1", port=8000)

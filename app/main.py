from contextlib import asynccontextmanager
import logging
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.endpoints.dashboard import router as dashboard_router
from app.core.config import settings
from app.services.product_store import ProductStoreClient
from app.services.refresh_coordinator import ProductStore, RefreshCoordinator

logging.basicConfig(level=settings.log_level)
_logger = logging.getLogger(__name__)


def create_app(store_factory: Optional[Callable[[], ProductStore]] = None,
               interval: Optional[float] = None) -> FastAPI:
    """
    Build the dashboard app. ``store_factory`` defaults to the HTTP client
    for ``settings.api_base_url``.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = store_factory() if store_factory else ProductStoreClient()
        coordinator = RefreshCoordinator(store, interval=interval)
        app.state.coordinator = coordinator
        await coordinator.start()
        _logger.info(f"Dashboard started, polling every {coordinator.interval}s")

        yield

        coordinator.dispose()
        aclose = getattr(store, "aclose", None)
        if aclose is not None:
            await aclose()
        _logger.info("Dashboard stopped")

    app = FastAPI(title="Product Dashboard", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(dashboard_router)
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=5010)

from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from alert_relay.api.health_router import router as health_router
from alert_relay.api.notify_router import router as notify_router
from alert_relay.config.settings import settings
from alert_relay.utils.logger import setup_logger

logger = setup_logger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)
    Instrumentator().instrument(app).expose(app)

    # Routers
    app.include_router(health_router)
    app.include_router(notify_router)

    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} ready")
    return app


app = create_app()

import uvicorn

from alert_relay.config.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        app="alert_relay.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=True,
        log_level=settings.LOG_LEVEL.lower(),
    )

# Info_app/main.py
from fastapi import FastAPI
from Info_app.config import Settings, get_settings
from Info_app.api.rest import rest_router
from Info_app.api.websocket import ws_router
from Info_app.realtime import Broadcaster
from Info_app.service import InfoService
from Info_app.store import KVStore
from logging.config import dictConfig


def configure_logging(level: str = "info") -> None:
    level = level.upper()
    dictConfig({
        "version": 1,
        "disable_existing_loggers": False,     # 기존 uvicorn 로거 유지
        "formatters": {
            "plain": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
        },
        "handlers": {
            "console": {"class": "logging.StreamHandler", "formatter": "plain"},
        },
        "loggers": {
            "": {"handlers": ["console"], "level": level},
            "uvicorn": {"handlers": ["console"], "level": level, "propagate": False},
            "uvicorn.error": {"handlers": ["console"], "level": level, "propagate": False},
            "uvicorn.access": {"handlers": ["console"], "level": level, "propagate": False},
        },
    })


def create_app(
    settings: Settings | None = None,
    store: KVStore | None = None,
    broadcaster: Broadcaster | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Info Server")

    # one store + one subscriber set per app, reachable only through app.state
    app.state.settings = settings
    app.state.service = InfoService(
        store if store is not None else KVStore(),
        broadcaster if broadcaster is not None else Broadcaster(queue_size=settings.subscriber_queue_size),
    )

    app.include_router(rest_router)   # /set, /get, /getall, /healthz
    app.include_router(ws_router)     # /info-ws

    return app


configure_logging(get_settings().log_level)
app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run("Info_app.main:app",
                host=settings.http_host,
                port=settings.http_port,
                log_config=None)

#uvicorn Info_app.main:app --host 0.0.0.0 --port 8080

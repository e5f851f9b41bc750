# app/main.py

import logging
from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi.responses import PlainTextResponse

from app.api.hello import GreetingEndpoint
from app.config import Settings
from app.models.health import HealthOut
from app.services.greeting import GreetingProvider, HelloService

logger = logging.getLogger(__name__)


def create_app(
    provider: Optional[GreetingProvider] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Composition root: wires settings -> provider -> endpoint -> FastAPI app.

    Pass `provider` to swap in a different greeting source (e.g. in tests).
    """
    if settings is None:
        settings = Settings()

    logging.getLogger("app").setLevel(settings.log_level)

    if provider is None:
        provider = HelloService.from_settings(settings)

    app = FastAPI(
        title="Hello API",
        version="0.1.0",
    )

    @app.get("/health", response_model=HealthOut)
    def health_check() -> HealthOut:
        return HealthOut(status="ok")

    endpoint = GreetingEndpoint(provider)
    router = APIRouter(tags=["hello"])
    for path, method, handler in endpoint.routes():
        router.add_api_route(
            path,
            handler,
            methods=[method],
            response_class=PlainTextResponse,
        )
        logger.info("Registered route %s %s", method, path)

    app.include_router(router)
    return app


app = create_app()

from fastapi import FastAPI
from liveness.api import health
from liveness.core.config import ServiceProfile


def create_app(profile: ServiceProfile) -> FastAPI:
    """Build the ASGI app for one service. The only route is GET /health."""
    app = FastAPI(
        title=profile.name,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.include_router(health.build_router(profile.health_body))
    return app

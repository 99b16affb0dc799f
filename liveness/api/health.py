from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


def build_router(health_body: str) -> APIRouter:
    router = APIRouter()

    # HEAD is answered too: some load balancers probe with it
    @router.api_route("/health", methods=["GET", "HEAD"], response_class=PlainTextResponse)
    async def liveness():
        # No request inspection: always alive while the loop is serving
        return health_body

    return router

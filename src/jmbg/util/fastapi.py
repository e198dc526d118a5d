import typing as t

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.responses import JSONResponse
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from jmbg.util.config import JmbgSettings
from jmbg.util.sentry import init as setup_sentry


class FastAPISettings(JmbgSettings):
    commit_tag: str = "dev"
    hide_docs: bool = True


def setup_fastapi(routers: t.Sequence[APIRouter] = (), **kwargs: t.Any) -> FastAPI:
    """
    Return a preconfigured FastAPI app with sentry, OTEL tracking, a /version
    endpoint and the given routers mounted.

    Responses from the routers carry decoded identifiers, so they are marked
    as not to be stored by caches.
    """
    setup_sentry()
    settings = FastAPISettings()

    kwargs["version"] = settings.commit_tag
    kwargs["openapi_url"] = None if settings.hide_docs else "/openapi.json"

    fastapi = FastAPI(**kwargs)
    FastAPIInstrumentor.instrument_app(fastapi)

    @fastapi.get("/version")
    async def version() -> JSONResponse:
        return JSONResponse({"version": settings.commit_tag}, headers={"Cache-Control": "no-cache"})

    for router in routers:
        fastapi.include_router(router)

    @fastapi.middleware("http")
    async def no_store(request: Request, call_next: t.Callable[[Request], t.Awaitable[Response]]) -> Response:
        response = await call_next(request)
        response.headers.setdefault("Cache-Control", "no-store")
        return response

    return fastapi

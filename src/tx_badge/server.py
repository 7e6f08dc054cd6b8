"""Translation stats badge proxy for the Python documentation project."""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from tx_badge.cache import StatsCache
from tx_badge.config import Settings
from tx_badge.errors import TxBadgeError
from tx_badge.providers.base import StatsProvider
from tx_badge.providers.transifex import TransifexProvider
from tx_badge.utils import normalize_version

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def create_app(cache: StatsCache, provider: StatsProvider | None = None) -> FastAPI:
    """Build the app around an already constructed cache.

    The provider, when given, is closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Server started")
        yield
        await cache.close()
        if provider:
            await provider.close()
        logger.info("Server stopped")

    # Every path is a version token, so the docs routes must not shadow it.
    app = FastAPI(
        title="tx-badge",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.cache = cache

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        uri = request.url.path
        if request.url.query:
            uri = f"{uri}?{request.url.query}"
        client = request.client
        remote = f"{client.host}:{client.port}" if client else "-"
        logger.info(
            "%s %s HTTP/%s %s %s",
            request.method,
            uri,
            request.scope.get("http_version", "1.1"),
            remote,
            request.headers.get("user-agent", ""),
        )
        return await call_next(request)

    @app.api_route("/{token:path}", methods=["GET", "HEAD"])
    async def translation_stats(token: str, request: Request) -> Response:
        version = normalize_version(token)
        try:
            body = await request.app.state.cache.get(version.value)
        except TxBadgeError as e:
            logger.error("Failed to get stats for %s: %s", version.value, e)
            return PlainTextResponse(str(e), status_code=500)

        logger.debug("Cache stats: %s", request.app.state.cache.stats())
        return Response(
            content=body,
            media_type="application/json",
            headers={"X-Version": version.value},
        )

    return app


def build_app(settings: Settings) -> FastAPI:
    provider = TransifexProvider(
        api_key=settings.key,
        api_url=settings.api_url,
        timeout=settings.timeout_seconds,
    )
    cache = StatsCache(
        provider,
        max_size=settings.cache_max_size,
        ttl=settings.cache_ttl_seconds,
    )
    if not settings.key:
        logger.warning("No Transifex API key given, Transifex will likely reject upstream calls")
    return create_app(cache, provider)


def main(argv: list[str] | None = None):
    settings = Settings(_cli_parse_args=argv if argv is not None else True)
    logging.getLogger().setLevel(settings.log_level.upper())
    app = build_app(settings)
    logger.info(f"Listening on {settings.host}:{settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    main()

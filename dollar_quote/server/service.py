"""FastAPI application serving the current dollar quote."""

import logging
from typing import Final

import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import PlainTextResponse

from ..storage.quote_storage import QuoteStorage, QuoteStorageError
from .models import QuoteResponse
from .settings import ServerSettings, server_settings
from .upstream import UpstreamClient, UpstreamError, UpstreamTimeoutError

QUOTE_PATH: Final[str] = "/cotacao"

REQUEST_TIMEOUT_MESSAGE: Final[str] = "request timeout"
NOT_FOUND_MESSAGE: Final[str] = "404 page not found"
METHOD_NOT_ALLOWED_MESSAGE: Final[str] = "405 method not allowed"

logger = logging.getLogger(__name__)

router = APIRouter()


def internal_server_error(exc: Exception) -> PlainTextResponse:
    """Report a failure to the caller with its error text."""
    return PlainTextResponse(str(exc), status_code=500)


@router.get(QUOTE_PATH, response_model=QuoteResponse)
async def get_quote(request: Request):
    """
    Fetch the current bid, persist it and return it.

    Responds 408 when the exchange rate API misses its deadline and 500 on
    any other failure; persistence is only attempted after a successful
    fetch. Exactly one response is produced per request.
    """
    settings: ServerSettings = request.app.state.settings
    upstream: UpstreamClient = request.app.state.upstream
    storage: QuoteStorage = request.app.state.storage

    try:
        bid = await upstream.fetch_bid(settings.upstream_timeout_ms / 1000)
    except UpstreamTimeoutError as e:
        logger.error(f"Request timeout: {e}")
        return PlainTextResponse(REQUEST_TIMEOUT_MESSAGE, status_code=408)
    except UpstreamError as e:
        logger.error(f"Failed to fetch quote: {e}")
        return internal_server_error(e)

    try:
        await storage.insert_quote(bid, settings.storage_timeout_ms / 1000)
    except QuoteStorageError as e:
        logger.error(f"Failed to store quote: {e} ({e.__cause__!r})")
        return internal_server_error(e)

    return QuoteResponse(bid=bid)


async def not_found_handler(_: Request, __: Exception) -> PlainTextResponse:
    """Handle requests to unknown paths."""
    return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=404)


async def method_not_allowed_handler(
    _: Request, __: Exception
) -> PlainTextResponse:
    """Handle methods other than GET on the quote route."""
    return PlainTextResponse(
        METHOD_NOT_ALLOWED_MESSAGE, status_code=405, headers={"Allow": "GET"}
    )


def create_app(
    settings: ServerSettings | None = None,
    upstream: UpstreamClient | None = None,
    storage: QuoteStorage | None = None,
) -> FastAPI:
    """
    Build the quote server application.

    Args:
        settings: Deadlines and upstream configuration
        upstream: Source of the bid, defaults to the configured API
        storage: Destination of quote records, defaults to the configured file

    Returns:
        FastAPI: Application with the quote route registered
    """
    settings = settings or server_settings

    app = FastAPI(
        title="Dollar Quote Server",
        description="Serves the current USD-BRL bid and records every quote",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.upstream = upstream or UpstreamClient(settings.upstream_url)
    app.state.storage = storage or QuoteStorage()

    app.include_router(router)
    app.add_exception_handler(404, not_found_handler)
    app.add_exception_handler(405, method_not_allowed_handler)
    return app


async def main() -> None:
    """Main entry point for the quote server."""
    app = create_app()
    config = uvicorn.Config(
        app,
        host=server_settings.server_host,
        port=server_settings.server_port,
        log_level=server_settings.log_level.lower(),
    )
    server = uvicorn.Server(config)
    logger.info(
        f"Server listening on {server_settings.server_host}:{server_settings.server_port}"
    )
    await server.serve()


if __name__ == "__main__":
    import asyncio

    asyncio.run(main())

"""
Quote client that asks the quote server for the dollar bid and saves it.
"""

import asyncio
import logging
import sys
from pathlib import Path

import aiohttp
from pydantic import ValidationError

from .models import QuotePayload
from .settings import ClientSettings, client_settings

logger = logging.getLogger(__name__)


class QuoteClientError(Exception):
    """Base class for quote client failures."""


class QuoteRequestError(QuoteClientError):
    """The request to the quote server failed before a response arrived."""


class QuoteStatusError(QuoteClientError):
    """The quote server answered with an unsuccessful status."""

    def __init__(self, status: int) -> None:
        super().__init__(f"response error {status}")
        self.status = status


class QuotePayloadError(QuoteClientError):
    """The quote server response body was not a quote."""


class QuoteClient:
    """Single-shot client for the quote server."""

    def __init__(self, settings: ClientSettings | None = None) -> None:
        self.settings = settings or client_settings

    async def fetch_bid(self) -> str:
        """Request the current bid from the quote server."""
        timeout = aiohttp.ClientTimeout(total=self.settings.request_timeout_ms / 1000)

        try:
            async with (
                aiohttp.ClientSession(timeout=timeout) as session,
                session.get(self.settings.server_url) as response,
            ):
                if response.status > self.settings.max_success_status:
                    raise QuoteStatusError(response.status)
                body = await response.read()
        except TimeoutError as e:
            raise QuoteRequestError(
                f"no response within {self.settings.request_timeout_ms}ms"
            ) from e
        except aiohttp.ClientError as e:
            raise QuoteRequestError(f"request failed: {e}") from e

        try:
            payload = QuotePayload.model_validate_json(body)
        except ValidationError as e:
            raise QuotePayloadError(f"invalid quote payload: {e}") from e

        return payload.bid

    def write_quote(self, bid: str) -> Path:
        """Overwrite the output file with the formatted quote."""
        path = Path(self.settings.output_path)
        path.write_text(QuotePayload(bid=bid).render(), encoding="utf-8")
        return path

    async def run(self) -> Path:
        """Fetch the bid and write it to the output file."""
        bid = await self.fetch_bid()
        path = self.write_quote(bid)
        logger.info(f"Wrote dollar quote {bid} to {path}")
        return path


async def main() -> None:
    """Main entry point for the quote client."""
    client = QuoteClient()
    await client.run()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except QuoteClientError as e:
        logger.error(f"Quote client failed: {e}")
        sys.exit(1)

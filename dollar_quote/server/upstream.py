"""
Client for the exchange rate API that supplies the dollar bid.
"""

import asyncio
import logging

import aiohttp
from pydantic import ValidationError

from .models import UpstreamPayload
from .settings import server_settings

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """The exchange rate API could not provide a bid."""


class UpstreamTimeoutError(UpstreamError):
    """The exchange rate API did not answer before the deadline."""


class UpstreamClient:
    """Fetches the current USD-BRL bid, one session per call."""

    def __init__(self, url: str | None = None) -> None:
        self.url = url or server_settings.upstream_url

    async def fetch_bid(self, timeout: float) -> str:
        """
        Fetch the current bid.

        The deadline covers connecting, reading and decoding the response.

        Args:
            timeout: Seconds allowed for the whole exchange

        Returns:
            The bid string exactly as the API sent it

        Raises:
            UpstreamTimeoutError: The deadline expired
            UpstreamError: Transport failure, error status or unexpected body
        """
        try:
            async with asyncio.timeout(timeout):
                async with (
                    aiohttp.ClientSession() as session,
                    session.get(self.url) as response,
                ):
                    response.raise_for_status()
                    body = await response.read()
        except TimeoutError as e:
            raise UpstreamTimeoutError(
                f"upstream did not answer within {timeout * 1000:.0f}ms"
            ) from e
        except aiohttp.ClientError as e:
            raise UpstreamError(f"upstream request failed: {e}") from e

        try:
            payload = UpstreamPayload.model_validate_json(body)
        except ValidationError as e:
            raise UpstreamError(
                f"unexpected upstream payload: {e.error_count()} validation error(s)"
            ) from e

        logger.debug(f"Fetched bid {payload.USDBRL.bid} from {self.url}")
        return payload.USDBRL.bid

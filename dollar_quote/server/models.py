"""
Wire models for the quote server.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class UpstreamBid(BaseModel):
    """The part of a currency pair quote the server consumes."""

    model_config = ConfigDict(extra="ignore")

    bid: Annotated[str, Field(min_length=1, description="Bid price as text")]


class UpstreamPayload(BaseModel):
    """Response body of the exchange rate API."""

    model_config = ConfigDict(extra="ignore")

    USDBRL: UpstreamBid


class QuoteResponse(BaseModel):
    """Body returned by GET /cotacao."""

    bid: Annotated[str, Field(description="Dollar bid in reais, verbatim")]

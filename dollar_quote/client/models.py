"""
Client-side model of the quote server response.
"""

from pydantic import BaseModel, StrictStr


class QuotePayload(BaseModel):
    """Body of a successful GET /cotacao."""

    bid: StrictStr

    def render(self) -> str:
        """Format the quote as written to the output file."""
        return f"Dólar: {self.bid}"

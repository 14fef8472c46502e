from typing import Protocol, runtime_checkable

from domain.models.quote import Quote


@runtime_checkable
class QuoteSource(Protocol):
    """Anything that can produce one quote for one provider."""

    @property
    def name(self) -> str:
        ...

    async def fetch_quote(self, currency_pair: str) -> Quote:
        ...

    async def close(self) -> None:
        ...

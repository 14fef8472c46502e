import time
from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Mapping

from domain.models.quote import AggregationResult, Quote, TradeDirection


@dataclass(frozen=True)
class RateSnapshot:
    """Latest aggregation plus the latest best quote chosen for each direction."""
    result: AggregationResult
    best_by_direction: Mapping[TradeDirection, Quote | None] = field(default_factory=dict)
    stored_at: float = field(default_factory=lambda: time.monotonic())


class RateCache:
    """
    Process-wide single slot holding the most recent aggregation.

    Writers build a complete ``RateSnapshot`` and swap the one reference, so a
    reader always sees either the previous snapshot or the new one.
    """

    def __init__(self, ttl_seconds: float | None = None):
        self.ttl_seconds = ttl_seconds
        self._snapshot: RateSnapshot | None = None

    def _current(self) -> RateSnapshot | None:
        snapshot = self._snapshot
        if snapshot is None:
            return None
        if self.ttl_seconds is not None and time.monotonic() - snapshot.stored_at > self.ttl_seconds:
            return None
        return snapshot

    def get(self) -> AggregationResult | None:
        snapshot = self._current()
        return snapshot.result if snapshot else None

    def best(self, direction: TradeDirection | str) -> Quote | None:
        snapshot = self._current()
        if snapshot is None:
            return None
        return snapshot.best_by_direction.get(TradeDirection.parse(direction))

    def snapshot(self) -> RateSnapshot | None:
        return self._current()

    def set(self, result: AggregationResult) -> RateSnapshot:
        # An expired snapshot must not carry its best quotes into the new one
        previous = self._current()
        best_by_direction = dict(previous.best_by_direction) if previous else {}
        best_by_direction[result.requested_direction] = result.best_quote

        snapshot = RateSnapshot(result=result, best_by_direction=MappingProxyType(best_by_direction))
        self._snapshot = snapshot
        return snapshot

    def restore(self, snapshot: RateSnapshot) -> None:
        """Install a snapshot loaded from elsewhere, aged by its ``aggregated_at``."""
        age = (datetime.now(tz=UTC) - snapshot.result.aggregated_at).total_seconds()
        self._snapshot = RateSnapshot(
            result=snapshot.result,
            best_by_direction=MappingProxyType(dict(snapshot.best_by_direction)),
            stored_at=time.monotonic() - max(age, 0.0),
        )

    def clear(self) -> None:
        self._snapshot = None

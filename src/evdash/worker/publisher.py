"""Summary publisher: owns the current bundle and notifies subscribers.

- Recomputes on explicit request (filter change or new dataset)
- Last-writer-wins: only the most recently started request may publish
- Forbidden: rendering concerns, mutating records

Each recompute is cheap and synchronous, so stale work is never
cancelled; its result is simply dropped at publish time.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Sequence

from evdash.aggregation.bundle import recompute
from evdash.models.domain import Record
from evdash.models.types import FilterCriteria, SummaryBundle

logger = logging.getLogger(__name__)

Subscriber = Callable[[SummaryBundle], None]


class SummaryPublisher:
    """Holds the latest SummaryBundle for a record set."""

    def __init__(
        self,
        records: Sequence[Record] | None = None,
        criteria: FilterCriteria | None = None,
    ):
        """Initialize publisher.

        Args:
            records: Initial dataset (may be empty until acquisition completes).
            criteria: Initial filter criteria. Defaults to no constraints.
        """
        self._records: list[Record] = list(records or [])
        self._criteria = criteria or FilterCriteria()
        self._current = SummaryBundle.empty()
        self._subscribers: list[Subscriber] = []
        self._latest_token = 0
        self._lock = threading.Lock()

    @property
    def current(self) -> SummaryBundle:
        """Most recently published bundle.

        Each access returns a private copy; editing its summary dicts never
        changes what other consumers see.
        """
        return self._current.model_copy(deep=True)

    @property
    def criteria(self) -> FilterCriteria:
        """Criteria of the most recently started request."""
        return self._criteria

    @property
    def records(self) -> list[Record]:
        return self._records

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback invoked with every published bundle.

        Returns:
            Function that removes the callback again.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def begin(self) -> int:
        """Start a recompute request and return its token."""
        with self._lock:
            self._latest_token += 1
            return self._latest_token

    def publish(self, token: int, bundle: SummaryBundle) -> bool:
        """Publish a bundle if its request is still the latest one.

        Args:
            token: Token returned by begin() for this request.
            bundle: Result of the request.

        Returns:
            True if published, False if a newer request superseded it.
        """
        with self._lock:
            if token != self._latest_token:
                logger.debug(f"Dropping stale summary (token {token} < {self._latest_token})")
                return False
            self._current = bundle.model_copy(deep=True)
            published = self._current

        for callback in list(self._subscribers):
            try:
                callback(published.model_copy(deep=True))
            except Exception as e:
                logger.error(f"Summary subscriber {callback!r} failed: {e}")
        return True

    def update(self, criteria: FilterCriteria) -> SummaryBundle:
        """Recompute for new criteria and publish the result.

        Returns:
            The bundle computed for this request, whether or not a newer
            request beat it to publication.
        """
        token = self.begin()
        self._criteria = criteria
        bundle = recompute(self._records, criteria)
        self.publish(token, bundle)
        return bundle

    def replace_records(self, records: Sequence[Record] | None) -> SummaryBundle:
        """Swap in a freshly acquired dataset and recompute with current criteria."""
        self._records = list(records or [])
        logger.info(f"Dataset replaced: {len(self._records)} records")
        return self.update(self._criteria)

"""
Service layer for querying delivery collections.

``QueryHelper`` bundles the read‑only queries used to report on
deliveries: filtering (paid, not finished, by client, by city and
type), ordering, counting, per‑route travel time and a generic paging
helper.  Every query takes a caller‑supplied iterable, never mutates
it and returns a freshly built list or value.  Iterables are consumed
once, so generators are accepted as well.

The class holds no state; its methods are class methods and can be
called either on the class or on an instance.  Module‑level aliases
are provided for callers who prefer plain functions.
"""

from __future__ import annotations

import logging
from collections import Counter
from datetime import timedelta
from itertools import islice
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, Tuple, TypeVar

from delivery_query.app.core.config import settings
from delivery_query.app.schemas.delivery import (
    AverageGapsInfo,
    Delivery,
    DeliveryShortInfo,
    DeliveryStatus,
    DeliveryType,
    FINISHED_STATUSES,
)

logger = logging.getLogger(__name__)


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T")
K = TypeVar("K", bound=SupportsLessThan)

# deliveries_by_city_and_type always returns at most this many records.
CITY_AND_TYPE_LIMIT = 10

_ONE_MINUTE = timedelta(minutes=1)


def _minutes_component(gap: timedelta) -> int:
    """Return the minutes part of ``gap`` (-59..59), ignoring days and hours.

    The sign follows the sign of ``gap`` and partial minutes are
    truncated toward zero, so ``1h05m30s`` gives 5 and ``-0h10m`` gives -10.
    """
    minutes = (abs(gap) // _ONE_MINUTE) % 60
    return -minutes if gap < timedelta(0) else minutes


class QueryHelper:
    """Stateless collection of queries over ``Delivery`` records."""

    @classmethod
    def paid(cls, deliveries: Iterable[Delivery]) -> List[Delivery]:
        """Return deliveries that have a payment attached."""
        return [delivery for delivery in deliveries if delivery.payment_id is not None]

    @classmethod
    def not_finished(cls, deliveries: Iterable[Delivery]) -> List[Delivery]:
        """Return deliveries still processed by the system (neither done nor cancelled)."""
        return [delivery for delivery in deliveries if delivery.status not in FINISHED_STATUSES]

    @classmethod
    def delivery_infos_by_client(
        cls, deliveries: Iterable[Delivery], client_id: str
    ) -> List[DeliveryShortInfo]:
        """Return short info records for every delivery of ``client_id``.

        An unknown client simply yields an empty list.
        """
        return [
            DeliveryShortInfo.from_delivery(delivery)
            for delivery in deliveries
            if delivery.client_id == client_id
        ]

    @classmethod
    def deliveries_by_city_and_type(
        cls,
        deliveries: Iterable[Delivery],
        city_name: str,
        type: DeliveryType,
    ) -> List[Delivery]:
        """Return the first ten deliveries starting in ``city_name`` with the given ``type``.

        Matches are taken in input order and anything past the tenth
        match is dropped, even when more records qualify.
        """
        matches = (
            delivery
            for delivery in deliveries
            if delivery.direction.origin.city == city_name and delivery.type == type
        )
        return list(islice(matches, CITY_AND_TYPE_LIMIT))

    @classmethod
    def order_by_status_then_by_start_loading(cls, deliveries: Iterable[Delivery]) -> List[Delivery]:
        """Sort by status ordinal, then by start of the loading period.

        The sort is stable: deliveries with equal status and loading
        start keep their input order.
        """
        return sorted(
            deliveries,
            key=lambda delivery: (delivery.status, delivery.loading_period.start),
        )

    @classmethod
    def count_uniq_cargo_types(cls, deliveries: Iterable[Delivery]) -> int:
        """Count distinct cargo types."""
        return len({delivery.cargo_type for delivery in deliveries})

    @classmethod
    def counts_by_delivery_status(cls, deliveries: Iterable[Delivery]) -> Dict[DeliveryStatus, int]:
        """Group deliveries by status and count each group.

        Only statuses that actually occur are present as keys, in the
        order they first appear in the input.
        """
        return dict(Counter(delivery.status for delivery in deliveries))

    @classmethod
    def average_travel_time_per_direction(cls, deliveries: Iterable[Delivery]) -> List[AverageGapsInfo]:
        """Average gap between end of loading and start of arrival for each route.

        Deliveries that have not finished loading or have not arrived
        are skipped.  The remaining ones are grouped by
        ``(origin city, destination city)`` in order of first
        appearance, and for each group the mean of the gaps' minutes
        component is returned.  Only the minutes part of each gap
        counts: hours and days are discarded, so a gap of 1h05m
        contributes 5.
        """
        groups: Dict[Tuple[str, str], List[int]] = {}
        for delivery in deliveries:
            loading_end = delivery.loading_period.end
            arrival_start = delivery.arrival_period.start
            if loading_end is None or arrival_start is None:
                continue
            key = (delivery.direction.origin.city, delivery.direction.destination.city)
            groups.setdefault(key, []).append(_minutes_component(arrival_start - loading_end))

        return [
            AverageGapsInfo(
                start_city=start_city,
                end_city=end_city,
                average_gap=sum(gaps) / len(gaps),
            )
            for (start_city, end_city), gaps in groups.items()
        ]

    @classmethod
    def paging(
        cls,
        elements: Iterable[T],
        ordering: Callable[[T], K],
        filter: Optional[Callable[[T], bool]] = None,
        count_on_page: Optional[int] = None,
        page_number: int = 1,
    ) -> List[T]:
        """Return one page of ``elements``.

        Parameters
        ----------
        elements : Iterable[T]
            Records to page through.  Any element type is accepted.
        ordering : Callable[[T], K]
            Key function; its results must be mutually comparable.
            Elements are sorted ascending (stable) by this key.
        filter : Optional[Callable[[T], bool]]
            Predicate applied before sorting.  ``None`` keeps every element.
        count_on_page : Optional[int]
            Page size.  Defaults to ``settings.default_page_size`` (100).
        page_number : int
            1‑based page index.

        Returns
        -------
        List[T]
            Up to ``count_on_page`` elements.  A page past the end, a
            non‑positive page size or a non‑positive page number yield
            an empty list rather than an error.
        """
        if count_on_page is None:
            count_on_page = settings.default_page_size
        if count_on_page <= 0 or page_number <= 0:
            logger.debug(
                "Empty page for count_on_page=%s page_number=%s", count_on_page, page_number
            )
            return []

        selected = elements if filter is None else (element for element in elements if filter(element))
        ordered = sorted(selected, key=ordering)
        offset = (page_number - 1) * count_on_page
        return ordered[offset : offset + count_on_page]


paid = QueryHelper.paid
not_finished = QueryHelper.not_finished
delivery_infos_by_client = QueryHelper.delivery_infos_by_client
deliveries_by_city_and_type = QueryHelper.deliveries_by_city_and_type
order_by_status_then_by_start_loading = QueryHelper.order_by_status_then_by_start_loading
count_uniq_cargo_types = QueryHelper.count_uniq_cargo_types
counts_by_delivery_status = QueryHelper.counts_by_delivery_status
average_travel_time_per_direction = QueryHelper.average_travel_time_per_direction
paging = QueryHelper.paging

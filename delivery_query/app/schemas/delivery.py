"""
Pydantic models for delivery data.

``Delivery`` is the input record handed to the query helper by the
caller.  It is frozen: the helper only reads it.  ``DeliveryShortInfo``
and ``AverageGapsInfo`` are the records the helper builds per call.

Status and type are integer enumerations so that ordering by them
follows the declared ordinal values.

Timestamps without a timezone are taken to be UTC, so every period in a
collection can be compared and subtracted with any other.
"""

from datetime import datetime, timezone
from enum import IntEnum
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, Field


class DeliveryStatus(IntEnum):
    Pending = 0
    InProgress = 1
    Done = 2
    Cancelled = 3


class DeliveryType(IntEnum):
    Standard = 0
    Express = 1
    Overnight = 2


# Statuses after which a delivery is no longer processed.
FINISHED_STATUSES = frozenset({DeliveryStatus.Done, DeliveryStatus.Cancelled})


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class Address(BaseModel):
    city: str = Field(..., examples=["Kyiv"])

    model_config = {"frozen": True}


class Direction(BaseModel):
    origin: Address
    destination: Address

    model_config = {"frozen": True}


class LoadingPeriod(BaseModel):
    """Loading window.  ``start`` is always known; ``end`` is unset until loading finishes."""

    start: UtcDatetime = Field(..., examples=["2025-09-01T10:00:00Z"])
    end: Optional[UtcDatetime] = Field(None, examples=["2025-09-01T11:30:00Z"])

    model_config = {"frozen": True}


class ArrivalPeriod(BaseModel):
    """Arrival window.  Both bounds are unset until the delivery arrives."""

    start: Optional[UtcDatetime] = Field(None, examples=["2025-09-02T08:00:00Z"])
    end: Optional[UtcDatetime] = None

    model_config = {"frozen": True}


class Delivery(BaseModel):
    id: str = Field(..., examples=["d-0001"])
    client_id: str = Field(..., examples=["c-42"])
    # Absent until the delivery is paid.
    payment_id: Optional[str] = Field(None, examples=["p-7781"])
    status: DeliveryStatus = DeliveryStatus.Pending
    type: DeliveryType = DeliveryType.Standard
    cargo_type: str = Field(..., examples=["Furniture"])
    direction: Direction
    loading_period: LoadingPeriod
    arrival_period: ArrivalPeriod = Field(default_factory=ArrivalPeriod)

    model_config = {"frozen": True}


class DeliveryShortInfo(BaseModel):
    """Projection of a delivery returned by ``QueryHelper.delivery_infos_by_client``."""

    id: str
    start_city: str
    end_city: str
    client_id: str
    type: DeliveryType
    loading_period: LoadingPeriod
    arrival_period: ArrivalPeriod
    status: DeliveryStatus
    cargo_type: str

    model_config = {"frozen": True}

    @classmethod
    def from_delivery(cls, delivery: Delivery) -> "DeliveryShortInfo":
        return cls(
            id=delivery.id,
            start_city=delivery.direction.origin.city,
            end_city=delivery.direction.destination.city,
            client_id=delivery.client_id,
            type=delivery.type,
            loading_period=delivery.loading_period,
            arrival_period=delivery.arrival_period,
            status=delivery.status,
            cargo_type=delivery.cargo_type,
        )


class AverageGapsInfo(BaseModel):
    """Average gap, in minutes, between end of loading and start of arrival for one route."""

    start_city: str
    end_city: str
    average_gap: float

    model_config = {"frozen": True}

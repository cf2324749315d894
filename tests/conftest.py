"""Shared fixtures for the delivery query tests."""

from datetime import datetime
from typing import Optional

import pytest

from delivery_query.app.schemas.delivery import (
    Address,
    ArrivalPeriod,
    Delivery,
    DeliveryStatus,
    DeliveryType,
    Direction,
    LoadingPeriod,
)

BASE_TIME = datetime(2025, 9, 1, 8, 0)


def build_delivery(
    id: str = "d-1",
    client_id: str = "c-1",
    payment_id: Optional[str] = None,
    status: DeliveryStatus = DeliveryStatus.Pending,
    type: DeliveryType = DeliveryType.Standard,
    cargo_type: str = "Food",
    origin: str = "Kyiv",
    destination: str = "Lviv",
    loading_start: datetime = BASE_TIME,
    loading_end: Optional[datetime] = None,
    arrival_start: Optional[datetime] = None,
    arrival_end: Optional[datetime] = None,
) -> Delivery:
    return Delivery(
        id=id,
        client_id=client_id,
        payment_id=payment_id,
        status=status,
        type=type,
        cargo_type=cargo_type,
        direction=Direction(origin=Address(city=origin), destination=Address(city=destination)),
        loading_period=LoadingPeriod(start=loading_start, end=loading_end),
        arrival_period=ArrivalPeriod(start=arrival_start, end=arrival_end),
    )


@pytest.fixture
def make_delivery():
    """Factory fixture building a ``Delivery`` with sensible defaults."""
    return build_delivery


@pytest.fixture
def mixed_deliveries():
    return [
        build_delivery(id="d-1", client_id="c-1", payment_id="p-1", status=DeliveryStatus.Done, cargo_type="Food"),
        build_delivery(id="d-2", client_id="c-2", status=DeliveryStatus.Pending, cargo_type="Furniture"),
        build_delivery(id="d-3", client_id="c-1", payment_id="p-3", status=DeliveryStatus.InProgress, cargo_type="Food"),
        build_delivery(id="d-4", client_id="c-3", status=DeliveryStatus.Cancelled, cargo_type="Electronics"),
        build_delivery(id="d-5", client_id="c-1", status=DeliveryStatus.Pending, cargo_type="Food"),
    ]

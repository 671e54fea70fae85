"""Saved quotation — the persisted shape the detail view and exports read.

The stored ``total`` / ``per_person`` are a snapshot taken at save time.
Anything displayed is re-priced from the stored selections against a fresh
catalog; the snapshot is never fed back into the engine.
"""

from __future__ import annotations

import random
from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from quotetrek.config.fields import Amount, Count, OptionalDate, OptionalId
from quotetrek.config.trip import (
    AddonList,
    DestinationStay,
    Stay,
    TransportList,
    TripParameters,
)
from quotetrek.models.results import PricingBreakdown, QuotationSnapshot

QuotationStatus = Literal["draft", "sent", "accepted", "rejected"]


def generate_quotation_number(
    prefix: str = "RTT",
    today: date | None = None,
    rng: random.Random | None = None,
) -> str:
    """``{prefix}-YYMMDD-NNNN`` with a zero-padded random 4-digit suffix."""
    today = today or date.today()
    rng = rng or random.Random()
    return f"{prefix}-{today:%y%m%d}-{rng.randrange(10_000):04d}"


class Quotation(BaseModel):
    """One customer quotation as stored."""

    id: OptionalId = None
    quotation_number: str = ""
    customer_name: str = ""
    customer_email: str | None = None
    customer_phone: str | None = None
    travel_type: str = Field(
        default="umrah",
        description="'umrah', 'ramadan_umrah', 'international' or 'domestic'",
    )
    travel_date: OptionalDate = None
    return_date: OptionalDate = None

    # --- Selections (priced) ---
    adults: Count = 1
    children: Count = 0
    infants: Count = 0
    pricing_package_id: OptionalId = None
    makkah: Stay = Field(default_factory=DestinationStay)
    madina: Stay = Field(default_factory=DestinationStay)
    visa_id: OptionalId = None
    transport: TransportList = Field(default_factory=list)
    addons: AddonList = Field(default_factory=list)
    discount: Amount = 0.0

    # --- Snapshot (never priced from) ---
    total: str | None = None
    per_person: str | None = None

    notes: str | None = None
    status: QuotationStatus = "draft"

    @property
    def paying_travelers(self) -> int:
        return self.adults + self.children

    def to_trip_parameters(self) -> TripParameters:
        """The stored selections, ready for ``calculate``."""
        return TripParameters(
            adults=self.adults,
            children=self.children,
            infants=self.infants,
            discount=self.discount,
            pricing_package_id=self.pricing_package_id,
            makkah=self.makkah,
            madina=self.madina,
            visa_id=self.visa_id,
            transport=self.transport,
            addons=self.addons,
        )

    def with_snapshot(self, breakdown: PricingBreakdown) -> Quotation:
        """Copy carrying ``breakdown``'s totals as the saved snapshot."""
        snapshot = QuotationSnapshot.from_breakdown(breakdown)
        return self.model_copy(update=snapshot.model_dump())

"""Quotation pricing — aggregates every rate source into one breakdown.

``calculate`` is pure: no I/O, no state between calls, identical inputs give
identical output.  It never raises on partial data.  Unresolved references
and malformed numbers price as zero, because the builder re-prices on every
keystroke while required fields may still be empty.

    subtotal   = hotels + package + meals + laundry + transport
               + visa + add-ons + service charges
    total      = max(0, subtotal − discount)
    per_person = total / (adults + children), or 0 when nobody pays
"""

from __future__ import annotations

import logging

from quotetrek.config.catalog import RateCatalog
from quotetrek.config.trip import TripParameters
from quotetrek.engine.accommodation import (
    compute_hotel_cost,
    compute_laundry_cost,
    compute_meal_cost,
)
from quotetrek.engine.charges import (
    compute_addons_cost,
    compute_package_charge,
    compute_service_charges,
    compute_transport_cost,
    compute_visa_cost,
)
from quotetrek.models.results import PricingBreakdown

logger = logging.getLogger(__name__)


def calculate(params: TripParameters, catalog: RateCatalog) -> PricingBreakdown:
    """Price ``params`` against ``catalog``.

    The catalog is used as given.  Callers pricing a live builder form pass
    ``catalog.active_only()``; callers re-pricing a saved quotation pass a
    fresh catalog read so the displayed total reflects today's rates.
    """
    adults = params.adults
    children = params.children
    infants = params.infants
    total_people = params.total_people
    paying_travelers = params.paying_travelers

    package_charge = compute_package_charge(
        params.pricing_package_id, catalog, adults, children, infants,
    )

    hotel_makkah = compute_hotel_cost(params.makkah, catalog, total_people, "makkah")
    hotel_madina = compute_hotel_cost(params.madina, catalog, total_people, "madina")
    meal_makkah = compute_meal_cost(params.makkah, catalog, total_people, "makkah")
    meal_madina = compute_meal_cost(params.madina, catalog, total_people, "madina")
    laundry = compute_laundry_cost(
        [stay for _, stay in params.stays()], catalog.laundry_rate(), paying_travelers,
    )

    transport = compute_transport_cost(params.transport, catalog)
    visa = compute_visa_cost(params.visa_id, catalog, paying_travelers)
    addons = compute_addons_cost(params.addons, catalog)
    service_charges = compute_service_charges(catalog.service_charges, adults, children)

    subtotal = (
        hotel_makkah + hotel_madina + package_charge + meal_makkah + meal_madina
        + laundry + transport + visa + addons + service_charges
    )
    total = max(0.0, subtotal - params.discount)
    per_person = total / paying_travelers if paying_travelers > 0 else 0.0

    logger.debug(
        "Priced %d traveler(s): subtotal=%.2f discount=%.2f total=%.2f",
        total_people, subtotal, params.discount, total,
    )

    return PricingBreakdown(
        hotel_makkah=hotel_makkah,
        hotel_madina=hotel_madina,
        meal_makkah=meal_makkah,
        meal_madina=meal_madina,
        laundry=laundry,
        package_charge=package_charge,
        transport=transport,
        visa=visa,
        addons=addons,
        service_charges=service_charges,
        subtotal=subtotal,
        discount=params.discount,
        total=total,
        per_person=per_person,
    )

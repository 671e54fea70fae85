"""Accommodation lines — hotel, meals and laundry for one city stay.

Hotel pricing models a room's nightly price shared evenly across its beds,
then charged once per traveler per night whether or not the room is full:

    per_person_rate = room_price(bed_size) / bed_size
    hotel_cost      = per_person_rate × total_people × nights
"""

from __future__ import annotations

import logging

from quotetrek.config.catalog import Hotel, LaundryRate, RateCatalog
from quotetrek.config.fields import parse_bed_size
from quotetrek.config.trip import DestinationStay

logger = logging.getLogger(__name__)


def room_price(hotel: Hotel, bed_size: int) -> float:
    """Nightly room price for ``bed_size``; unknown sizes use the 2-bed price."""
    prices = {
        2: hotel.price_2_bed,
        3: hotel.price_3_bed,
        4: hotel.price_4_bed,
        5: hotel.price_5_bed,
    }
    return prices.get(bed_size, hotel.price_2_bed)


def compute_hotel_cost(
    stay: DestinationStay,
    catalog: RateCatalog,
    total_people: int,
    destination: str = "",
) -> float:
    """Hotel cost for one stay, 0 when no hotel resolves or no nights booked."""
    if stay.hotel_id is None or stay.nights <= 0:
        return 0.0
    hotel = catalog.find_hotel(stay.hotel_id)
    if hotel is None:
        logger.debug("Unknown %s hotel id %s priced at 0", destination or "stay", stay.hotel_id)
        return 0.0

    bed_size = parse_bed_size(stay.room_beds)
    per_person_rate = room_price(hotel, bed_size) / bed_size
    return per_person_rate * total_people * stay.nights


def compute_meal_cost(
    stay: DestinationStay,
    catalog: RateCatalog,
    total_people: int,
    destination: str = "",
) -> float:
    """Meal cost for one stay: every traveler, infants included, every night."""
    if not stay.meal_plan or stay.nights <= 0:
        return 0.0
    meal = catalog.find_meal(stay.meal_plan)
    if meal is None:
        logger.debug("Unknown %s meal plan %r priced at 0", destination or "stay", stay.meal_plan)
        return 0.0
    return total_people * meal.price_per_day * stay.nights


def compute_laundry_cost(
    stays: list[DestinationStay],
    laundry: LaundryRate | None,
    paying_travelers: int,
) -> float:
    """Laundry across all stays that asked for it, at the one shared daily rate."""
    if laundry is None:
        return 0.0
    return sum(
        laundry.price_per_day * stay.nights * paying_travelers
        for stay in stays
        if stay.laundry and stay.nights > 0
    )

"""Engine — deterministic quotation pricing."""

from quotetrek.engine.pricing import calculate
from quotetrek.engine.accommodation import (
    compute_hotel_cost,
    compute_laundry_cost,
    compute_meal_cost,
    room_price,
)
from quotetrek.engine.charges import (
    compute_addons_cost,
    compute_package_charge,
    compute_service_charges,
    compute_transport_cost,
    compute_visa_cost,
)
from quotetrek.engine.selection import (
    clamp_count,
    suggest_addon,
    suggest_transport,
    vehicles_needed,
)

__all__ = [
    "calculate",
    "compute_hotel_cost",
    "compute_meal_cost",
    "compute_laundry_cost",
    "room_price",
    "compute_package_charge",
    "compute_transport_cost",
    "compute_visa_cost",
    "compute_addons_cost",
    "compute_service_charges",
    # Builder defaults
    "vehicles_needed",
    "suggest_transport",
    "suggest_addon",
    "clamp_count",
]

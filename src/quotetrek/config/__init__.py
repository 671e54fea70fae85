"""Configuration models — catalog, trip and quotation inputs."""

from quotetrek.config.catalog import (
    Addon,
    Hotel,
    LaundryRate,
    MealPlan,
    PricingPackage,
    RateCatalog,
    ServiceCharge,
    TransportRoute,
    Visa,
)
from quotetrek.config.trip import (
    AddonSelection,
    DestinationStay,
    TransportSelection,
    TripParameters,
)
from quotetrek.config.quotation import Quotation, generate_quotation_number
from quotetrek.config.settings import Settings

__all__ = [
    "Hotel",
    "PricingPackage",
    "MealPlan",
    "LaundryRate",
    "TransportRoute",
    "Visa",
    "Addon",
    "ServiceCharge",
    "RateCatalog",
    "DestinationStay",
    "TransportSelection",
    "AddonSelection",
    "TripParameters",
    "Quotation",
    "generate_quotation_number",
    "Settings",
]

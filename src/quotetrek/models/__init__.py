"""Result models — pricing output contracts."""

from quotetrek.models.results import PricingBreakdown, QuotationSnapshot

__all__ = [
    "PricingBreakdown",
    "QuotationSnapshot",
]

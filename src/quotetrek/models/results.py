"""Result types — the contract between the engine, the API and exports.

All amounts are unrounded floats in the catalog's currency.  Rounding and
formatting belong to whoever displays them.
"""

from __future__ import annotations

from pydantic import BaseModel


class PricingBreakdown(BaseModel):
    """Itemized price of one quotation."""

    # --- Accommodation ---
    hotel_makkah: float = 0.0
    """Per-bed share of the Makkah room rate × all travelers × nights."""

    hotel_madina: float = 0.0
    """Same as ``hotel_makkah`` for the Madina stay."""

    meal_makkah: float = 0.0
    """All travelers × meal plan daily rate × Makkah nights."""

    meal_madina: float = 0.0
    """All travelers × meal plan daily rate × Madina nights."""

    laundry: float = 0.0
    """Shared daily laundry rate × paying travelers × nights, both cities combined."""

    # --- Per-trip / per-head charges ---
    package_charge: float = 0.0
    """Flat per-head package rates (adult/child/infant)."""

    transport: float = 0.0
    """Σ route price per trip × vehicles."""

    visa: float = 0.0
    """Visa price × paying travelers."""

    addons: float = 0.0
    """Σ add-on unit price × quantity."""

    service_charges: float = 0.0
    """Active service charges × charged adults/children."""

    # --- Totals ---
    subtotal: float = 0.0
    """Sum of every line above."""

    discount: float = 0.0
    """Discount as requested (may exceed the subtotal)."""

    total: float = 0.0
    """max(0, subtotal − discount)."""

    per_person: float = 0.0
    """total / paying travelers; 0 when nobody pays."""


class QuotationSnapshot(BaseModel):
    """Totals frozen onto a quotation when it is saved.

    Stored as 2-decimal strings, the way the persistence layer keeps
    decimals.  Never read back by the engine.
    """

    total: str
    per_person: str

    @classmethod
    def from_breakdown(cls, breakdown: PricingBreakdown) -> QuotationSnapshot:
        return cls(
            total=f"{breakdown.total:.2f}",
            per_person=f"{breakdown.per_person:.2f}",
        )

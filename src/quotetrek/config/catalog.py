"""Rate catalog — master-data entities the engine prices against.

Rates arrive from storage as decimal strings (``"1200.00"``) and from the
builder as whatever the form holds, so every rate field is an ``Amount``:
parsed leniently, never negative.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, Field

from quotetrek.config.fields import Amount, Count, Flag


class Hotel(BaseModel):
    """A hotel with fixed nightly room prices per bed configuration."""

    id: int
    name: str = Field(default="", description="Hotel name")
    location: str = Field(default="makkah", description="'makkah' or 'madina'")
    star_rating: Count = Field(default=3, description="Star rating")
    price_2_bed: Amount = Field(default=0.0, description="Nightly room price, 2-bed room")
    price_3_bed: Amount = Field(default=0.0, description="Nightly room price, 3-bed room")
    price_4_bed: Amount = Field(default=0.0, description="Nightly room price, 4-bed room")
    price_5_bed: Amount = Field(default=0.0, description="Nightly room price, 5-bed room")
    description: str | None = None
    is_active: Flag = True


class PricingPackage(BaseModel):
    """Flat per-head rate tier, charged on top of itemized costs."""

    id: int
    name: str = ""
    adult_rate: Amount = Field(default=0.0, description="Per adult")
    child_rate: Amount = Field(default=0.0, description="Per child")
    infant_rate: Amount = Field(default=0.0, description="Per infant")
    description: str | None = None
    is_active: Flag = True


class MealPlan(BaseModel):
    """Meal plan, matched by exact ``name`` (e.g. 'Half Board')."""

    id: int
    name: str
    price_per_day: Amount = Field(default=0.0, description="Per head per day")
    description: str | None = None
    is_active: Flag = True


class LaundryRate(BaseModel):
    """Laundry service.  The engine uses only the first active entry."""

    id: int
    name: str = ""
    price_per_day: Amount = Field(default=0.0, description="Per paying traveler per day")
    description: str | None = None
    is_active: Flag = True


class TransportRoute(BaseModel):
    """A transport route priced per vehicle trip, whatever the occupancy."""

    id: int
    route_name: str = ""
    vehicle_type: str = Field(default="", description="e.g. 'Sedan', 'GMC', 'Hiace 12-seater'")
    capacity: Count = Field(default=0, description="Seats per vehicle")
    price_per_trip: Amount = Field(default=0.0, description="Per vehicle per trip")
    description: str | None = None
    is_active: Flag = True


class Visa(BaseModel):
    """Visa type, charged per paying traveler."""

    id: int
    visa_type: str = ""
    price: Amount = Field(default=0.0, description="Per paying traveler")
    processing_days: Count = Field(default=7, description="Processing time (days)")
    description: str | None = None
    is_active: Flag = True


class Addon(BaseModel):
    """Optional extra charged per unit."""

    id: int
    name: str = ""
    price: Amount = Field(default=0.0, description="Per unit")
    description: str | None = None
    is_active: Flag = True


class ServiceCharge(BaseModel):
    """Per-head service fee.

    ``charge_type`` is carried as metadata only: the engine adds ``amount``
    as a flat fee for both kinds.  ``applies_to`` is kept as a plain string
    so that an unexpected value prices to nothing instead of failing.
    """

    id: int
    name: str = ""
    charge_type: str = Field(default="fixed", description="'fixed' or 'percentage'")
    amount: Amount = Field(default=0.0, description="Fee per charged head")
    applies_to: str = Field(default="all", description="'adult', 'child', 'infant' or 'all'")
    description: str | None = None
    is_active: Flag = True


_Entity = TypeVar("_Entity", bound=BaseModel)


def _find_by_id(entities: list[_Entity], entity_id: int | None) -> _Entity | None:
    if entity_id is None:
        return None
    return next((e for e in entities if e.id == entity_id), None)


def _active(entities: list[_Entity]) -> list[_Entity]:
    return [e for e in entities if e.is_active]


class RateCatalog(BaseModel):
    """Every rate source available to one pricing call.

    Built fresh per request by the caller.  Lookups never raise: an unknown
    id or name returns ``None`` and the engine prices that line at zero.
    """

    hotels: list[Hotel] = Field(default_factory=list)
    pricing_packages: list[PricingPackage] = Field(default_factory=list)
    meals: list[MealPlan] = Field(default_factory=list)
    laundry: list[LaundryRate] = Field(default_factory=list)
    transport: list[TransportRoute] = Field(default_factory=list)
    visas: list[Visa] = Field(default_factory=list)
    addons: list[Addon] = Field(default_factory=list)
    service_charges: list[ServiceCharge] = Field(default_factory=list)

    # --- Lookups -------------------------------------------------------------

    def find_hotel(self, hotel_id: int | None) -> Hotel | None:
        return _find_by_id(self.hotels, hotel_id)

    def find_package(self, package_id: int | None) -> PricingPackage | None:
        return _find_by_id(self.pricing_packages, package_id)

    def find_meal(self, name: str | None) -> MealPlan | None:
        """Exact, case-sensitive name match."""
        if not name:
            return None
        return next((m for m in self.meals if m.name == name), None)

    def find_transport(self, route_id: int | None) -> TransportRoute | None:
        return _find_by_id(self.transport, route_id)

    def find_visa(self, visa_id: int | None) -> Visa | None:
        return _find_by_id(self.visas, visa_id)

    def find_addon(self, addon_id: int | None) -> Addon | None:
        return _find_by_id(self.addons, addon_id)

    def laundry_rate(self) -> LaundryRate | None:
        """The single shared laundry rate: first active entry, if any."""
        return next((entry for entry in self.laundry if entry.is_active), None)

    # --- Filtering -----------------------------------------------------------

    def hotels_in(self, location: str) -> list[Hotel]:
        """Active hotels at ``location`` ('makkah' / 'madina'), as the builder lists them."""
        wanted = location.strip().lower()
        return [h for h in self.hotels if h.is_active and h.location.strip().lower() == wanted]

    def active_only(self) -> RateCatalog:
        """Copy restricted to active entries, as the live builder prices."""
        return RateCatalog(
            hotels=_active(self.hotels),
            pricing_packages=_active(self.pricing_packages),
            meals=_active(self.meals),
            laundry=_active(self.laundry),
            transport=_active(self.transport),
            visas=_active(self.visas),
            addons=_active(self.addons),
            service_charges=_active(self.service_charges),
        )

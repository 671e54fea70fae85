"""Shared test fixtures — a small Umrah rate catalog and a family trip."""

from __future__ import annotations

import pytest

from quotetrek.config import (
    Addon,
    AddonSelection,
    DestinationStay,
    Hotel,
    LaundryRate,
    MealPlan,
    PricingPackage,
    Quotation,
    RateCatalog,
    ServiceCharge,
    TransportRoute,
    TransportSelection,
    TripParameters,
    Visa,
)


@pytest.fixture
def makkah_hotel() -> Hotel:
    # Decimal strings, as rates come out of storage.
    return Hotel(
        id=1,
        name="Swissotel Al Maqam",
        location="makkah",
        star_rating=5,
        price_2_bed="1000.00",
        price_3_bed="1200.00",
        price_4_bed="1400.00",
        price_5_bed="1500.00",
    )


@pytest.fixture
def madina_hotel() -> Hotel:
    return Hotel(
        id=2,
        name="Anwar Al Madinah Movenpick",
        location="madina",
        star_rating=5,
        price_2_bed=800,
        price_3_bed=900,
        price_4_bed=1000,
        price_5_bed=1100,
    )


@pytest.fixture
def closed_hotel() -> Hotel:
    return Hotel(id=3, name="Closed for renovation", location="makkah", price_2_bed=500, is_active=False)


@pytest.fixture
def catalog(makkah_hotel: Hotel, madina_hotel: Hotel, closed_hotel: Hotel) -> RateCatalog:
    return RateCatalog(
        hotels=[makkah_hotel, madina_hotel, closed_hotel],
        pricing_packages=[
            PricingPackage(id=10, name="Economy", adult_rate="80000", child_rate="40000", infant_rate="10000"),
        ],
        meals=[
            MealPlan(id=20, name="Half Board", price_per_day=50),
            MealPlan(id=21, name="Full Board", price_per_day=80),
        ],
        laundry=[
            LaundryRate(id=30, name="Standard", price_per_day=15),
            LaundryRate(id=31, name="Premium", price_per_day=25),
        ],
        transport=[
            TransportRoute(id=40, route_name="Jeddah Airport → Makkah", vehicle_type="GMC", capacity=7, price_per_trip=450),
            TransportRoute(id=41, route_name="Makkah → Madina", vehicle_type="Hiace 12-seater", capacity=12, price_per_trip=900),
        ],
        visas=[Visa(id=50, visa_type="Umrah Visa", price=200, processing_days=5)],
        addons=[
            Addon(id=60, name="Ziyarat tour", price=120),
            Addon(id=61, name="SIM card", price=30),
        ],
        service_charges=[
            ServiceCharge(id=70, name="Booking fee", charge_type="fixed", amount=50, applies_to="all"),
            ServiceCharge(id=71, name="Old child fee", amount=999, applies_to="child", is_active=False),
        ],
    )


@pytest.fixture
def family_trip() -> TripParameters:
    """2 adults, 1 child, 1 infant; every line item selected."""
    return TripParameters(
        adults=2,
        children=1,
        infants=1,
        discount="780",
        pricing_package_id=10,
        makkah=DestinationStay(hotel_id=1, nights=4, room_beds=4, meal_plan="Half Board", laundry=True),
        madina=DestinationStay(hotel_id=2, nights=3, room_beds="3", meal_plan="Full Board", laundry=False),
        visa_id=50,
        transport=[
            TransportSelection(route_id=40, vehicle_count=1),
            TransportSelection(route_id=41, vehicle_count=1),
        ],
        addons=[
            AddonSelection(addon_id=60, quantity=4),
            AddonSelection(addon_id=61, quantity=2),
        ],
    )


@pytest.fixture
def saved_quotation(family_trip: TripParameters) -> Quotation:
    return Quotation(
        id=7,
        quotation_number="RTT-250307-0042",
        customer_name="Aisha Rahman",
        customer_phone="+44 7700 900123",
        travel_type="ramadan_umrah",
        travel_date="2025-03-07T00:00:00.000Z",
        return_date="2025-03-14",
        total="1.00",  # stale snapshot, never priced from
        per_person="0.33",
        **family_trip.model_dump(),
    )

"""Per-head and per-selection charges — package, transport, visa, add-ons, fees."""

from __future__ import annotations

import logging

from quotetrek.config.catalog import RateCatalog, ServiceCharge
from quotetrek.config.trip import AddonSelection, TransportSelection

logger = logging.getLogger(__name__)

ADULT_SCOPES = frozenset({"all", "adult"})
CHILD_SCOPES = frozenset({"all", "child"})


def compute_package_charge(
    package_id: int | None,
    catalog: RateCatalog,
    adults: int,
    children: int,
    infants: int,
) -> float:
    """Flat per-head package rates.  Independent of any itemized selection."""
    package = catalog.find_package(package_id)
    if package is None:
        if package_id is not None:
            logger.debug("Unknown pricing package id %s priced at 0", package_id)
        return 0.0
    return (
        package.adult_rate * adults
        + package.child_rate * children
        + package.infant_rate * infants
    )


def compute_transport_cost(selections: list[TransportSelection], catalog: RateCatalog) -> float:
    """Σ price per trip × vehicle count.  Occupancy does not matter."""
    total = 0.0
    for selection in selections:
        route = catalog.find_transport(selection.route_id)
        if route is None:
            logger.debug("Unknown transport route id %s priced at 0", selection.route_id)
            continue
        total += route.price_per_trip * selection.vehicle_count
    return total


def compute_visa_cost(visa_id: int | None, catalog: RateCatalog, paying_travelers: int) -> float:
    """Visa price × paying travelers (infants excluded)."""
    visa = catalog.find_visa(visa_id)
    if visa is None:
        if visa_id is not None:
            logger.debug("Unknown visa id %s priced at 0", visa_id)
        return 0.0
    return visa.price * paying_travelers


def compute_addons_cost(selections: list[AddonSelection], catalog: RateCatalog) -> float:
    """Σ unit price × quantity."""
    total = 0.0
    for selection in selections:
        addon = catalog.find_addon(selection.addon_id)
        if addon is None:
            logger.debug("Unknown add-on id %s priced at 0", selection.addon_id)
            continue
        total += addon.price * selection.quantity
    return total


def compute_service_charges(
    charges: list[ServiceCharge],
    adults: int,
    children: int,
) -> float:
    """Flat fee per charged adult and child, over every active charge.

    Infants are never charged: ``"all"`` covers adults and children only,
    and an ``"infant"``-scoped charge contributes nothing.  ``charge_type``
    is not consulted; a ``"percentage"`` charge is added as a flat amount.
    """
    total = 0.0
    for charge in charges:
        if not charge.is_active:
            continue
        if charge.applies_to in ADULT_SCOPES:
            total += charge.amount * adults
        if charge.applies_to in CHILD_SCOPES:
            total += charge.amount * children
    return total

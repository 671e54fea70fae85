"""Builder defaults — what a selection starts at when the user ticks it."""

from __future__ import annotations

import math

from quotetrek.config.catalog import Addon, TransportRoute
from quotetrek.config.trip import AddonSelection, TransportSelection


def clamp_count(value: int) -> int:
    """Manually edited vehicle counts and quantities never go below 1."""
    return max(1, value)


def vehicles_needed(total_travelers: int, capacity: int) -> int:
    """Vehicles to seat everyone: ceil(travelers / capacity).

    A route without a usable capacity defaults to a single vehicle.
    """
    if capacity <= 0:
        return 1
    return math.ceil(max(0, total_travelers) / capacity)


def suggest_transport(route: TransportRoute, total_travelers: int) -> TransportSelection:
    """Selection for a freshly ticked route, sized to the whole party."""
    return TransportSelection(
        route_id=route.id,
        vehicle_count=vehicles_needed(total_travelers, route.capacity),
    )


def suggest_addon(addon: Addon, total_travelers: int) -> AddonSelection:
    """Selection for a freshly ticked add-on: one unit per traveler."""
    return AddonSelection(addon_id=addon.id, quantity=total_travelers)

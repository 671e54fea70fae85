"""WhatsApp export — customer-facing quotation message and chat link.

The message is built from a saved quotation plus a live pricing breakdown,
so the quoted per-person price always reflects the current catalog.
"""

from __future__ import annotations

import re
from datetime import date
from urllib.parse import quote

from quotetrek.config.catalog import Hotel, RateCatalog
from quotetrek.config.quotation import Quotation
from quotetrek.config.settings import Settings, settings as default_settings
from quotetrek.config.trip import DestinationStay
from quotetrek.models.results import PricingBreakdown

WHATSAPP_BASE_URL = "https://wa.me/"


def _format_date(value: date | None) -> str:
    return value.strftime("%d/%m/%Y") if value else "TBD"


def _format_money(amount: float) -> str:
    return f"{amount:,.2f}"


def _accommodation_block(city: str, hotel: Hotel, stay: DestinationStay) -> str:
    return (
        f"*{city.upper()} ACCOMMODATION*\n"
        f"🏨 Hotel: {hotel.name}\n"
        f"🌙 Duration: {stay.nights} nights\n"
        f"🍽️ Meal Plan: {stay.meal_plan or 'Room Only'}\n"
        f"🧺 Laundry: {'Included' if stay.laundry else 'Not Included'}"
    )


def generate_whatsapp_message(
    quotation: Quotation,
    catalog: RateCatalog,
    breakdown: PricingBreakdown,
    settings: Settings | None = None,
) -> str:
    """Render the quotation as a WhatsApp-formatted (``*bold*``) message.

    Accommodation and visa sections appear only for selections that resolve
    in ``catalog``.  The price line uses ``breakdown.per_person``.
    """
    settings = settings or default_settings
    paying_travelers = quotation.paying_travelers
    travel_type = quotation.travel_type.replace("_", " ").upper()

    sections: list[str] = []

    sections.append(
        "*Dear Valuable Customer,*\n\n"
        f"Greetings from *{settings.company_name}*.!!!\n"
        "Thanks for your query and we are pleased to send details as per your requirement!!!"
    )

    sections.append(
        "*PACKAGE SUMMARY*\n"
        f"✈️ Package Type: {travel_type}\n"
        f"📅 Travel Date: {_format_date(quotation.travel_date)}\n"
        f"📅 Return Date: {_format_date(quotation.return_date)}"
    )

    sections.append(
        "*TRAVELERS*\n"
        f"👨‍👩‍👧‍👦 Adults: {quotation.adults}\n"
        f"👧 Children: {quotation.children}\n"
        f"👶 Infants: {quotation.infants} (Free)"
    )

    for city, stay in (("Makkah", quotation.makkah), ("Madina", quotation.madina)):
        hotel = catalog.find_hotel(stay.hotel_id)
        if hotel is not None:
            sections.append(_accommodation_block(city, hotel, stay))

    visa = catalog.find_visa(quotation.visa_id)
    if visa is not None:
        sections.append(
            "*VISA DETAILS*\n"
            f"📄 Visa Type: {visa.visa_type}\n"
            f"⏱️ Processing: {visa.processing_days} days"
        )

    inclusions = [
        "Airfare",
        "Accommodation (Hotels mentioned above)",
        "Meal Plans as selected",
        "Visa Processing",
    ]
    if quotation.makkah.laundry or quotation.madina.laundry:
        inclusions.append("Laundry Service")
    inclusions += ["Transport & Ziyarat", "24/7 Support", "Complimentary Kit"]
    sections.append("*PACKAGE INCLUSIONS*\n" + "\n".join(f"▪️ {item}" for item in inclusions))

    sections.append(
        "*PRICING*\n"
        "💰 *Total Package Amount*\n"
        f"*{paying_travelers} Travelers: {settings.currency_code} "
        f"{settings.currency_symbol}{_format_money(breakdown.per_person)} Per Person*\n"
        f"Grand Total: {settings.currency_symbol}{_format_money(breakdown.total)}"
    )

    sections.append(
        "*IF YOU HAVE ANY QUERY FEEL FREE TO CONTACT US*\n"
        f"📞 Call/WhatsApp: {settings.company_phone}\n"
        f"📧 Email: {settings.company_email}"
    )

    sections.append(
        "*THANKS & REGARDS*\n"
        f"*TEAM {settings.company_name.upper()}*"
    )

    sections.append(
        "*NOTE: Room and Airline Fare are Subject to Availability at the time of confirmation.*\n"
        f"*This quotation is valid for {settings.quotation_validity_days} days from the date of issue.*"
    )

    sections.append(f"Quotation Reference: {quotation.quotation_number}")

    return "\n\n".join(sections)


def whatsapp_url(phone_number: str, message: str) -> str:
    """``wa.me`` chat link with ``message`` pre-filled.

    Non-digits are stripped from the phone number (``"+966 50-123"`` → ``96650123``).
    """
    clean_phone = re.sub(r"\D", "", phone_number)
    return f"{WHATSAPP_BASE_URL}{clean_phone}?text={quote(message, safe='')}"

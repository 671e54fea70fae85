"""Tests for api/whatsapp.py — customer message and chat link."""

from __future__ import annotations

from urllib.parse import unquote

import pytest

from quotetrek.api.whatsapp import generate_whatsapp_message, whatsapp_url
from quotetrek.config import DestinationStay, Quotation, RateCatalog, Settings
from quotetrek.engine.pricing import calculate


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        company_name="Safa Travels",
        company_phone="+966 12 345 6789",
        company_email="hello@safa.example",
        currency_code="SAR",
        currency_symbol="",
        quotation_validity_days=10,
    )


@pytest.fixture
def message(saved_quotation, catalog, test_settings) -> str:
    breakdown = calculate(saved_quotation.to_trip_parameters(), catalog)
    return generate_whatsapp_message(saved_quotation, catalog, breakdown, test_settings)


class TestMessage:

    def test_greeting_and_company(self, message):
        assert message.startswith("*Dear Valuable Customer,*")
        assert "Greetings from *Safa Travels*" in message
        assert "*TEAM SAFA TRAVELS*" in message
        assert "📞 Call/WhatsApp: +966 12 345 6789" in message
        assert "📧 Email: hello@safa.example" in message

    def test_package_summary(self, message):
        assert "✈️ Package Type: RAMADAN UMRAH" in message
        assert "📅 Travel Date: 07/03/2025" in message
        assert "📅 Return Date: 14/03/2025" in message

    def test_travelers(self, message):
        assert "Adults: 2" in message
        assert "Children: 1" in message
        assert "Infants: 1 (Free)" in message

    def test_accommodation_blocks(self, message):
        assert "*MAKKAH ACCOMMODATION*\n🏨 Hotel: Swissotel Al Maqam" in message
        assert "🌙 Duration: 4 nights" in message
        assert "🍽️ Meal Plan: Half Board" in message
        assert "*MADINA ACCOMMODATION*\n🏨 Hotel: Anwar Al Madinah Movenpick" in message
        assert "🧺 Laundry: Not Included" in message

    def test_visa_block(self, message):
        assert "📄 Visa Type: Umrah Visa" in message
        assert "⏱️ Processing: 5 days" in message

    def test_laundry_inclusion(self, message):
        assert "▪️ Laundry Service" in message

    def test_price_is_live_per_person(self, message):
        # 223,000 / 3 paying travelers; the stale stored snapshot is ignored
        assert "*3 Travelers: SAR 74,333.33 Per Person*" in message
        assert "Grand Total: 223,000.00" in message
        assert "0.33 Per Person" not in message

    def test_validity_and_reference(self, message):
        assert "valid for 10 days" in message
        assert message.endswith("Quotation Reference: RTT-250307-0042")


class TestOptionalSections:

    def test_unresolved_selections_are_omitted(self):
        quotation = Quotation(
            quotation_number="RTT-1",
            makkah=DestinationStay(hotel_id=99, nights=3),
            visa_id=123,
        )
        catalog = RateCatalog()
        message = generate_whatsapp_message(quotation, catalog, calculate(quotation.to_trip_parameters(), catalog))
        assert "ACCOMMODATION" not in message
        assert "VISA DETAILS" not in message
        assert "Laundry Service" not in message
        assert "Travel Date: TBD" in message

    def test_room_only_when_no_meal_plan(self, catalog):
        quotation = Quotation(makkah=DestinationStay(hotel_id=1, nights=2))
        message = generate_whatsapp_message(quotation, catalog, calculate(quotation.to_trip_parameters(), catalog))
        assert "🍽️ Meal Plan: Room Only" in message


class TestUrl:

    def test_phone_digits_only(self):
        url = whatsapp_url("+44 (7700) 900-123", "Hi")
        assert url == "https://wa.me/447700900123?text=Hi"

    def test_message_is_url_encoded(self):
        text = "*Total*: £1,200 & more\nThanks"
        url = whatsapp_url("966500000000", text)
        encoded = url.split("?text=", 1)[1]
        assert " " not in encoded
        assert "&" not in encoded
        assert unquote(encoded) == text

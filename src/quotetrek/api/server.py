"""FastAPI server — pricing and export endpoints for the quotation builder.

Run with:
    uvicorn quotetrek.api.server:app --reload --port 8000

Or:
    python -m quotetrek.api.server

Endpoints:
    GET  /health            — liveness probe
    GET  /schema            — JSON Schemas for TripParameters and RateCatalog
    POST /quote/price       — price trip parameters against a catalog
    POST /quote/snapshot    — re-price a saved quotation and attach its snapshot
    POST /quote/whatsapp    — re-price a saved quotation and render the WhatsApp message
    POST /quotation-number  — fresh quotation reference

Every request carries its own catalog.  The service keeps no state between
requests.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from quotetrek.api.whatsapp import generate_whatsapp_message, whatsapp_url
from quotetrek.config.catalog import RateCatalog
from quotetrek.config.quotation import Quotation, generate_quotation_number
from quotetrek.config.settings import settings
from quotetrek.config.trip import TripParameters
from quotetrek.engine.pricing import calculate
from quotetrek.models.results import PricingBreakdown

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="QuoteTrek Pricing API",
    version="1.0",
    description=(
        "Deterministic pricing for Umrah travel quotations. Send trip "
        "parameters plus the rate catalog to price against; receive an "
        "itemized breakdown, a per-person price and WhatsApp-ready text."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class PriceRequest(BaseModel):
    """Request body for /quote/price."""
    params: TripParameters = Field(default_factory=TripParameters)
    catalog: RateCatalog = Field(default_factory=RateCatalog)
    active_only: bool = Field(
        default=False,
        description="Drop inactive catalog entries before pricing, as the live builder does.",
    )


class QuotationRequest(BaseModel):
    """Request body for /quote/snapshot."""
    quotation: Quotation
    catalog: RateCatalog = Field(default_factory=RateCatalog)


class WhatsAppRequest(QuotationRequest):
    """Request body for /quote/whatsapp."""
    phone: str | None = Field(
        default=None,
        description="Customer phone for the wa.me link. Falls back to the quotation's customer_phone.",
    )


class SnapshotResponse(BaseModel):
    quotation: Quotation
    breakdown: PricingBreakdown


class WhatsAppResponse(BaseModel):
    message: str
    breakdown: PricingBreakdown
    url: str | None = None


class QuotationNumberResponse(BaseModel):
    quotation_number: str


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _price_quotation(quotation: Quotation, catalog: RateCatalog) -> PricingBreakdown:
    """Live price of a saved quotation.  The stored snapshot is ignored."""
    return calculate(quotation.to_trip_parameters(), catalog)


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — name, version and where to look next."""
    return {
        "name": "QuoteTrek Pricing API",
        "version": "1.0",
        "start_here": "GET /schema",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/schema")
def get_schema():
    """JSON Schemas for the two pricing inputs."""
    return {
        "trip_parameters": TripParameters.model_json_schema(),
        "rate_catalog": RateCatalog.model_json_schema(),
    }


@app.post("/quote/price", response_model=PricingBreakdown)
def price_quote(req: PriceRequest):
    """Price trip parameters against the supplied catalog.

    Numeric fields are parsed leniently: blanks and garbage price as zero,
    so this is safe to call on every builder keystroke.
    """
    catalog = req.catalog.active_only() if req.active_only else req.catalog
    return calculate(req.params, catalog)


@app.post("/quote/snapshot", response_model=SnapshotResponse)
def snapshot_quote(req: QuotationRequest):
    """Re-price a quotation and attach total / per-person as saved strings."""
    breakdown = _price_quotation(req.quotation, req.catalog)
    logger.info(
        "Snapshot %s: total=%.2f per_person=%.2f",
        req.quotation.quotation_number or "<new>", breakdown.total, breakdown.per_person,
    )
    return SnapshotResponse(
        quotation=req.quotation.with_snapshot(breakdown),
        breakdown=breakdown,
    )


@app.post("/quote/whatsapp", response_model=WhatsAppResponse)
def whatsapp_quote(req: WhatsAppRequest):
    """Re-price a quotation and render it as a WhatsApp message (+ chat link)."""
    breakdown = _price_quotation(req.quotation, req.catalog)
    message = generate_whatsapp_message(req.quotation, req.catalog, breakdown, settings)
    phone = req.phone or req.quotation.customer_phone
    return WhatsAppResponse(
        message=message,
        breakdown=breakdown,
        url=whatsapp_url(phone, message) if phone else None,
    )


@app.post("/quotation-number", response_model=QuotationNumberResponse)
def new_quotation_number():
    """Fresh ``PREFIX-YYMMDD-NNNN`` reference for a new quotation."""
    return QuotationNumberResponse(
        quotation_number=generate_quotation_number(settings.quotation_prefix),
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def main():
    """Run the API server."""
    import uvicorn

    configure_logging(settings.log_level)
    logger.info("Starting QuoteTrek API on %s:%d", settings.host, settings.port)
    uvicorn.run(
        "quotetrek.api.server:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    main()

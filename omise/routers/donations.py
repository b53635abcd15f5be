"""Donation page endpoints.

- GET  /:                       houses that can receive donations
- POST /donate:                 charge the tokenized card, answer with a flash
- GET  /donations/{charge_id}:  status of a past donation

The card is tokenized in the browser (Omise.js); only the token reaches
this app.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from omise.api.result import Failure
from omise.middleware.error_handler import error_meta, status_for_error
from omise.models.requests import HOUSES, DonationRequest
from omise.models.responses import ApiResponse, flash

logger = logging.getLogger(__name__)

THANK_YOU_MESSAGE = "Thanks for donating!"


def create_donations_router(
    *,
    charges: Any,
    currency: str,
) -> APIRouter:
    """Factory that creates the donations router with injected dependencies.

    Parameters
    ----------
    charges:
        ``ChargeResource`` (or any object with the same ``create`` /
        ``retrieve`` methods).
    currency:
        Currency every donation is charged in.
    """
    donations_router = APIRouter(tags=["donations"])

    @donations_router.get("/")
    def index() -> dict:
        return ApiResponse(success=True, data={"houses": list(HOUSES)}).model_dump()

    @donations_router.post("/donate")
    def donate(body: DonationRequest) -> JSONResponse:
        """Create one charge and report the outcome as a flash message."""
        result = charges.create(
            card=body.omise_token,
            amount=body.amount,
            currency=currency,
            description=f"Donate to {body.house}",
        )

        if isinstance(result, Failure):
            error = result.error
            logger.info("Donation to %s failed: %s", body.house, error.code)
            meta = error_meta(error)
            meta.update(flash("error", error.message))
            return JSONResponse(
                status_code=status_for_error(error),
                content=ApiResponse(success=False, error=error.message, meta=meta).model_dump(),
            )

        charge = result.value
        logger.info("Donation %s to %s created", charge.id, body.house)
        return JSONResponse(
            status_code=200,
            content=ApiResponse(
                success=True,
                data={**flash("info", THANK_YOU_MESSAGE), "charge_id": charge.id},
            ).model_dump(),
        )

    @donations_router.get("/donations/{charge_id}")
    def donation_status(charge_id: str) -> dict:
        """Look up a donation; a failed lookup is rendered by the error handler."""
        charge = charges.retrieve(charge_id).unwrap()
        return ApiResponse(
            success=True,
            data={
                "charge_id": charge.id,
                "amount": charge.amount,
                "currency": charge.currency,
                "description": charge.description,
                "status": charge.status,
                "paid": charge.paid,
            },
        ).model_dump()

    return donations_router

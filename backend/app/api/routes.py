from __future__ import annotations

from fastapi import APIRouter

from app.api.v1 import addresses, client_config, otp, quotes

router = APIRouter()
router.include_router(addresses.router, prefix="/v1/addresses", tags=["addresses"])
router.include_router(otp.router, prefix="/v1/otp", tags=["otp"])
router.include_router(quotes.router, prefix="/v1/quotes", tags=["quotes"])
router.include_router(client_config.router, prefix="/v1/config", tags=["config"])

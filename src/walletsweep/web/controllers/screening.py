"""Address screening API endpoints.

Both endpoints proxy to the legacy screening server and pass its JSON body
through unchanged, whatever status the server answered with. Error bodies
use the legacy `{"error": ...}` shape:
- 400 when the address parameter is missing or empty
- 500 when the server is not configured, unreachable, or returns non-JSON
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from walletsweep.config import get_settings
from walletsweep.web.services.screening_service import ScreeningError, ScreeningService

router = APIRouter(prefix="/screening", tags=["screening"])

ADDRESS_REQUIRED = "Address parameter is required"


def get_screening_service() -> ScreeningService:
    settings = get_settings()
    return ScreeningService(settings.legacy_server_url)


@router.get("/blacklist")
async def blacklist_check(
    address: Optional[str] = None,
    service: ScreeningService = Depends(get_screening_service),
):
    """Check whether an address is blacklisted."""
    if not address:
        return JSONResponse(status_code=400, content={"error": ADDRESS_REQUIRED})
    try:
        return await service.check_blacklist(address)
    except ScreeningError:
        return JSONResponse(status_code=500, content={"error": "Failed to check blacklist status"})


@router.get("/whitelist")
async def whitelist_check(
    address: Optional[str] = None,
    service: ScreeningService = Depends(get_screening_service),
):
    """Check whether an address is whitelisted."""
    if not address:
        return JSONResponse(status_code=400, content={"error": ADDRESS_REQUIRED})
    try:
        return await service.check_whitelist(address)
    except ScreeningError:
        return JSONResponse(status_code=500, content={"error": "Failed to check whitelist status"})

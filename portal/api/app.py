"""FastAPI application serving the daily WiFi password."""

import logging
from typing import Optional
from fastapi import Depends, FastAPI, HTTPException, Response
from shared.config.config import config
from shared.domain.models import LookupResult
from shared.wifi_qr import build_wifi_payload, render_qr_svg
from portal.services.lookup_service import PasswordLookupService, create_lookup_service

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Guest WiFi Password Portal")

_lookup_service: Optional[PasswordLookupService] = None


def get_lookup_service() -> PasswordLookupService:
    """
    Return the process-wide lookup service, creating it on first use.

    The service owns the record cache, so sharing one instance lets every
    request reuse the parsed table.
    """
    global _lookup_service
    if _lookup_service is None:
        _lookup_service = create_lookup_service()
    return _lookup_service


@app.get("/health")
async def health_check() -> dict:
    """
    Liveness probe for container orchestration.

    Returns:
        Dict with status "ok" if service is healthy.
    """
    return {"status": "ok"}


@app.get("/password", response_model=LookupResult)
def current_password_endpoint(
    include_yesterday: bool = False,
    service: PasswordLookupService = Depends(get_lookup_service),
) -> LookupResult:
    """
    Return today's password.

    Always answers 200: lookup failures travel in the `error` and
    `error_state` fields so the page can render them.
    """
    return service.get_current_password(include_yesterday=include_yesterday)


@app.get("/password/qr.svg")
def current_password_qr_endpoint(
    service: PasswordLookupService = Depends(get_lookup_service),
) -> Response:
    """
    Return a QR code that joins the network with today's password.

    Raises:
        HTTPException: 404 with the lookup error if there is no password today.
    """
    result = service.get_current_password()
    if result.password is None:
        raise HTTPException(status_code=404, detail=result.error)

    try:
        payload = build_wifi_payload(
            network_name=result.network_name,
            password=result.password,
            security=config.WIFI_SECURITY,
            hidden=config.WIFI_HIDDEN,
        )
    except ValueError as e:
        logger.error(f"Invalid WiFi QR configuration: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return Response(
        content=render_qr_svg(payload),
        media_type="image/svg+xml",
        headers={"Cache-Control": "no-store"},
    )

"""
Redirect Endpoint

Catch-all GET /{name} that resolves a short name and answers with a
permanent redirect to the stored URL.

This router must be included after every other router. Starlette matches
routes in registration order, so including it last keeps /links and the
health routes from ever being read as short names.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from shortlinks.api.dependencies import get_link_service
from shortlinks.api.links import to_http_exception
from shortlinks.api.schemas import ErrorResponse
from shortlinks.core.exceptions import ServiceError
from shortlinks.core.rate_limit import RATE_LIMITS, limiter
from shortlinks.services.link_service import LinkService

router = APIRouter(tags=["Redirect"])


@router.get(
    "/{name}",
    status_code=status.HTTP_301_MOVED_PERMANENTLY,
    response_class=RedirectResponse,
    summary="Redirect to the link's URL",
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Unknown short name"}}
)
@limiter.limit(RATE_LIMITS["redirect"])
async def redirect_to_url(
    name: str,
    request: Request,
    service: LinkService = Depends(get_link_service)
) -> RedirectResponse:
    """
    Redirect to the URL stored for a short name.

    Any non-empty path segment is a legal lookup key. The Location header
    carries the stored URL percent-encoded by Starlette (e.g. "café" -> "caf%C3%A9").

    Returns:
        RedirectResponse (HTTP 301) to the stored URL

    Raises:
        HTTPException 404: If no link uses this name
    """
    try:
        link = await service.get_by_name(name)
    except ServiceError as e:
        raise to_http_exception(e)

    return RedirectResponse(
        url=link.url,
        status_code=status.HTTP_301_MOVED_PERMANENTLY
    )

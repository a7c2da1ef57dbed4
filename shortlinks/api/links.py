"""
FastAPI Endpoints for Link Management

This module defines the CRUD endpoints under /links with minimal logic.
Endpoints only handle:
- Request validation (Pydantic models and typed path parameters)
- Rate limiting
- Translating service errors into HTTP responses
- Delegating to the link service

Malformed bodies and ids are rejected by FastAPI before the endpoint or the
store is reached, so validation failures never write anything.
"""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from shortlinks.api.dependencies import get_link_service
from shortlinks.api.schemas import ErrorResponse, LinkRequest, LinkResponse
from shortlinks.core.exceptions import ConflictError, InternalError, NotFoundError, ServiceError
from shortlinks.core.rate_limit import RATE_LIMITS, limiter
from shortlinks.services.link_service import LinkService

router = APIRouter(prefix="/links", tags=["Links"])

_ERROR_STATUS = {
    ConflictError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid id or body"},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Link not found"},
}


def to_http_exception(error: ServiceError) -> HTTPException:
    """Map a service error onto the HTTP status it stands for."""
    status_code = _ERROR_STATUS.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=status_code, detail=error.message)


@router.get(
    "",
    response_model=list[LinkResponse],
    summary="List all links"
)
@limiter.limit(RATE_LIMITS["read"])
async def list_links(
    request: Request,  # Required for rate limiting (slowapi expects parameter named 'request')
    service: LinkService = Depends(get_link_service)
) -> list[LinkResponse]:
    try:
        links = await service.list_all()
    except ServiceError as e:
        raise to_http_exception(e)
    return [LinkResponse.model_validate(link) for link in links]


@router.post(
    "",
    response_model=LinkResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a link",
    description="Stores a new short name to URL mapping. Short names are unique.",
    responses={
        status.HTTP_400_BAD_REQUEST: _ERROR_RESPONSES[status.HTTP_400_BAD_REQUEST],
        status.HTTP_409_CONFLICT: {"model": ErrorResponse, "description": "Short name already exists"},
    }
)
@limiter.limit(RATE_LIMITS["write"])
async def create_link(
    request: Request,
    body: LinkRequest,
    service: LinkService = Depends(get_link_service)
) -> LinkResponse:
    """
    Create a new link.

    Returns:
        The created link, including its assigned id

    Raises:
        HTTPException 409: If the short name is already taken
        HTTPException 500: If the database fails
    """
    try:
        link = await service.create(body.name, body.url)
    except ServiceError as e:
        raise to_http_exception(e)
    return LinkResponse.model_validate(link)


@router.get(
    "/{link_id}",
    response_model=LinkResponse,
    summary="Get a link by id",
    responses=_ERROR_RESPONSES
)
@limiter.limit(RATE_LIMITS["read"])
async def get_link(
    request: Request,
    link_id: uuid.UUID,
    service: LinkService = Depends(get_link_service)
) -> LinkResponse:
    try:
        link = await service.get_by_id(link_id)
    except ServiceError as e:
        raise to_http_exception(e)
    return LinkResponse.model_validate(link)


@router.put(
    "/{link_id}",
    response_model=LinkResponse,
    summary="Replace a link",
    description="Replaces both name and url of an existing link. The id never changes.",
    responses={
        **_ERROR_RESPONSES,
        status.HTTP_409_CONFLICT: {"model": ErrorResponse, "description": "Short name already exists"},
    }
)
@limiter.limit(RATE_LIMITS["write"])
async def update_link(
    request: Request,
    link_id: uuid.UUID,
    body: LinkRequest,
    service: LinkService = Depends(get_link_service)
) -> LinkResponse:
    """
    Replace name and url of a link.

    Raises:
        HTTPException 404: If no link has this id
        HTTPException 409: If another link already uses the new name
    """
    try:
        link = await service.update(link_id, body.name, body.url)
    except ServiceError as e:
        raise to_http_exception(e)
    return LinkResponse.model_validate(link)


@router.delete(
    "/{link_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Delete a link",
    responses=_ERROR_RESPONSES
)
@limiter.limit(RATE_LIMITS["write"])
async def delete_link(
    request: Request,
    link_id: uuid.UUID,
    service: LinkService = Depends(get_link_service)
) -> Response:
    """
    Delete a link. Responds 200 with an empty body.

    Raises:
        HTTPException 404: If no link has this id (message includes the id)
    """
    try:
        await service.delete(link_id)
    except ServiceError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_200_OK)

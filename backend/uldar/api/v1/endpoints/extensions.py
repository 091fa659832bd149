"""Uldar — Extension API endpoint: POST /extensions/{extension}/{path...}."""
from fastapi import APIRouter, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from uldar.api.deps import CurrentUser, Extensions
from uldar.core.responses import (
    ApiCallResponse,
    Forbidden,
    InvalidRequest,
    NotFound,
    Ok,
    SystemError,
    UnsupportedRequest,
    to_envelope,
)
from uldar.sdk.extension import ApiCallRequest

router = APIRouter()

STATUS_CODES: dict[type[ApiCallResponse], int] = {
    Ok: status.HTTP_200_OK,
    InvalidRequest: status.HTTP_400_BAD_REQUEST,
    Forbidden: status.HTTP_403_FORBIDDEN,
    NotFound: status.HTTP_404_NOT_FOUND,
    UnsupportedRequest: status.HTTP_404_NOT_FOUND,
    SystemError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def render(response: ApiCallResponse) -> JSONResponse:
    status_code = STATUS_CODES.get(type(response), status.HTTP_400_BAD_REQUEST)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(to_envelope(response)))


@router.post("/{path:path}")
async def process_api_call(path: str, request: Request, service: Extensions, user: CurrentUser) -> JSONResponse:
    """Dispatch the JSON body to the extension named by the first path segment. An empty or malformed body is sent as null."""
    try:
        data = await request.json()
    except ValueError:
        data = None
    segments = [segment for segment in path.split("/") if segment]
    response = await service.process_api_call(segments, ApiCallRequest(data, user))
    return render(response)

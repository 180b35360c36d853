"""Render endpoint for the API."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from csvdoc.conversion import ConversionOptions, convert
from csvdoc.exceptions import InputTooLargeError, UnsupportedFileTypeError
from csvdoc.utils.logging_config import get_logger
from server.models import RenderErrorResponse, RenderRequest, RenderSuccessResponse
from server.server_config import MAX_INPUT_BYTES, MAX_INPUT_KB

logger = get_logger(__name__)

router = APIRouter()

COMMON_RENDER_RESPONSES: dict[int | str, dict] = {
    status.HTTP_200_OK: {"model": RenderSuccessResponse, "description": "Rendered HTML"},
    status.HTTP_400_BAD_REQUEST: {"model": RenderErrorResponse, "description": "Unsupported file type"},
    413: {"model": RenderErrorResponse, "description": "Input too large"},
}


def _check_size(text: str) -> None:
    size = len(text.encode("utf-8"))
    if size > MAX_INPUT_BYTES:
        raise InputTooLargeError(f"Input is {size / 1024:.1f} KB, the limit is {MAX_INPUT_KB} KB")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=RenderErrorResponse(error=message).model_dump())


@router.post("/api/render", responses=COMMON_RENDER_RESPONSES)
def api_render(render_request: RenderRequest) -> JSONResponse:
    """Convert a CSVDoc/TSVDoc document to HTML.

    **Parameters**

    - **render_request** (`RenderRequest`): document text, file type and formatting flag

    **Returns**

    - **JSONResponse**: the HTML with row and node counts, or an error with status **400**
      (unsupported file type) or **413** (input over the size limit)

    """
    try:
        _check_size(render_request.text)
        result = convert(
            render_request.text,
            ConversionOptions(file_type=render_request.file_type, pretty=render_request.pretty),
        )
    except UnsupportedFileTypeError as exc:
        logger.info("Rejected render request", extra={"reason": str(exc)})
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))
    except InputTooLargeError as exc:
        logger.info("Rejected render request", extra={"reason": str(exc)})
        return _error(413, str(exc))

    logger.info(
        "Rendered document",
        extra={"file_type": render_request.file_type, "node_count": result.node_count},
    )
    response = RenderSuccessResponse(html=result.html, row_count=result.row_count, node_count=result.node_count)
    return JSONResponse(content=response.model_dump())

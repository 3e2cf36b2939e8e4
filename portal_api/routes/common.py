"""
Helpers shared by the listing route modules: boundary validation,
envelope building and CSV export.
"""
from typing import Any, Iterable, Optional, Type

from fastapi.responses import StreamingResponse

from listing_engine.engine import QueryResult
from listing_engine.export import frame_to_csv_bytes, listings_to_frame

from ..config import config
from ..errors import ApiError, ErrorCodes
from ..models import ApiModel, Envelope, ErrorEnvelope, PageMetaOut

ERROR_RESPONSES = {
    400: {"model": ErrorEnvelope, "description": "Invalid request parameters"},
    404: {"model": ErrorEnvelope, "description": "Listing not found"},
    500: {"model": ErrorEnvelope, "description": "Internal server error"},
}


def check_pagination(page: int, limit: int) -> None:
    """Reject out-of-range pagination before the engine ever sees it."""
    if page < 1 or limit < 1 or limit > config.MAX_PAGE_SIZE:
        raise ApiError(
            "Invalid pagination parameters",
            ErrorCodes.VALIDATION_ERROR,
            400,
            {"page": page, "limit": limit},
        )


def choice(value: Optional[str]) -> Optional[str]:
    """Treat empty values and the UI's "all" option as no constraint."""
    if value is None:
        return None
    value = value.strip()
    if not value or value.lower() == "all":
        return None
    return value


def only(flag: Optional[bool]) -> Optional[bool]:
    """``featured=true`` narrows the result; ``featured=false`` does not."""
    return True if flag else None


def split_choices(value: Optional[str]) -> Optional[tuple]:
    """Comma separated multi-select (``condition=new,like_new``)."""
    value = choice(value)
    if value is None:
        return None
    return tuple(part.strip() for part in value.split(",") if part.strip())


def page_envelope(envelope: Type[Envelope], item_model: Type[ApiModel],
                  result: QueryResult, message: str) -> Envelope:
    return envelope(
        data=[item_model.model_validate(x) for x in result.listings],
        message=message,
        meta=PageMetaOut.from_meta(result.meta),
    )


def not_found(kind: str, listing_id: str) -> ApiError:
    return ApiError(
        f"{kind} not found",
        ErrorCodes.RESOURCE_NOT_FOUND,
        404,
        {"id": listing_id},
    )


def csv_response(listings: Iterable[Any], filename: str) -> StreamingResponse:
    """Stream listings as a CSV attachment."""
    csv_content = frame_to_csv_bytes(listings_to_frame(listings))
    return StreamingResponse(
        iter([csv_content]),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

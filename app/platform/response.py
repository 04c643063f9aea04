from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def api_response(
    *,
    message: str,
    data: Optional[dict] = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """
    Single source of truth for ALL API responses.

    The website front-end reads ``success`` and ``message`` at the top level,
    so extra fields in ``data`` are merged into the body instead of nested.
    ``success`` is True if status_code < 400.
    """
    content: dict[str, Any] = {
        "success": status_code < 400,
        "message": message,
    }
    if data:
        content.update(jsonable_encoder(data))

    return JSONResponse(status_code=status_code, content=content)

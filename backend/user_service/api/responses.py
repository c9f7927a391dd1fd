"""JSON Response Writer — one generic writer for every success and error payload.

Invariants:
    - Any Pydantic model, list of models or plain dict serializes through json_response
    - An encoding failure never escapes: it becomes a logged 500 envelope
"""

import logging
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from user_service.schemas.user import MessageResponse

logger = logging.getLogger(__name__)

ENCODE_ERROR_MESSAGE = (
    "error while encoding the response from the server "
    "(the user request has been processed)"
)


def json_response(payload: Any, status_code: int = 200) -> JSONResponse:
    """Serialize payload as JSON, falling back to a 500 envelope if encoding fails."""
    try:
        return JSONResponse(
            status_code=status_code, content=jsonable_encoder(payload),
        )
    except (TypeError, ValueError) as e:
        logger.error(f"{ENCODE_ERROR_MESSAGE}: {e}", exc_info=True)
        return JSONResponse(
            status_code=500, content={"message": ENCODE_ERROR_MESSAGE},
        )


def error_response(message: str, status_code: int = 500) -> JSONResponse:
    """Error envelope {"message": ...}; 0 or missing status means 500."""
    return json_response(MessageResponse(message=message), status_code or 500)

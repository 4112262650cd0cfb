from typing import Any, Optional
from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def send_response(result: Any, message: str) -> dict:
    return {
        "success": True,
        "data": result,
        "message": message,
    }


def send_error(message: str, code: int = status.HTTP_404_NOT_FOUND, data: Optional[Any] = None) -> JSONResponse:
    content = {
        "success": False,
        "message": message,
    }
    # data is only present when there is something to report
    if data is not None:
        content["data"] = jsonable_encoder(data)
    return JSONResponse(status_code=code, content=content)

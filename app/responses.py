from enum import IntEnum
from typing import Any, Optional
from fastapi.encoders import jsonable_encoder


class Status(IntEnum):
    OK = 200
    INVALID_PARAMETER = 400
    UNKNOWN_SESSION = 402
    NOT_FOUND = 404
    DUPLICATED = 409
    INTERNAL_SERVER_ERROR = 500


def response(status: Status, message: Optional[str] = None, data: Any = None) -> dict:
    body: dict = {"status": int(status)}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = jsonable_encoder(data)
    return body

from typing import Optional

from bson import ObjectId
from fastapi import HTTPException, Path, status
from pymongo.database import Database

from emporium.db.mongo import get_database, parse_object_id


class APIError(HTTPException):
    """HTTPException whose body renders as ``{"message": ...}``."""

    def __init__(self, status_code: int, message: str):
        super().__init__(status_code=status_code, detail=message)
        self.message = message


def get_db() -> Database:
    return get_database()


def valid_object_id(value: Optional[str]) -> ObjectId:
    oid = parse_object_id(value)
    if oid is None:
        raise APIError(status.HTTP_400_BAD_REQUEST, "Invalid ID")
    return oid


def path_object_id(id: str = Path(...)) -> ObjectId:
    return valid_object_id(id)

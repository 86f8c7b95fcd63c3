import logging
import re
from typing import Optional

from bson import ObjectId
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pymongo.database import Database

from emporium.api import serialize
from emporium.api.deps import APIError, get_db, path_object_id
from emporium.db.mongo import USERS, parse_object_id
from emporium.models.schemas import UserIn, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def register_user(payload: UserIn, db: Database = Depends(get_db)):
    users = db[USERS]
    if users.find_one({"email": payload.email}):
        logger.info("Registration skipped, %s already exists", payload.email)
        return JSONResponse(status_code=status.HTTP_200_OK, content={"message": "User already exists"})
    result = users.insert_one(payload.to_document())
    logger.info("Registered user %s", result.inserted_id)
    return serialize.inserted(result)


@router.get("/{uid}")
def get_user(uid: str, db: Database = Depends(get_db)):
    users = db[USERS]
    oid = parse_object_id(uid)
    user = users.find_one({"_id": oid}) if oid else None
    if not user:
        user = users.find_one({"email": uid})
    if not user:
        raise APIError(status.HTTP_404_NOT_FOUND, "User not found")
    return serialize.document(user)


@router.get("")
def list_users(role: Optional[str] = None, search: Optional[str] = None, db: Database = Depends(get_db)):
    query = {}
    if role:
        query["role"] = role
    if search:
        query["name"] = {"$regex": re.escape(search), "$options": "i"}
    return serialize.documents(db[USERS].find(query))


@router.put("/{id}")
def update_user(payload: UserUpdate, oid: ObjectId = Depends(path_object_id), db: Database = Depends(get_db)):
    result = db[USERS].update_one({"_id": oid}, {"$set": payload.to_document()})
    return serialize.updated(result)


@router.delete("/{id}")
def delete_user(oid: ObjectId = Depends(path_object_id), db: Database = Depends(get_db)):
    return serialize.deleted(db[USERS].delete_one({"_id": oid}))

import re
from typing import Optional

from bson import ObjectId
from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from emporium.api import serialize
from emporium.api.deps import APIError, get_db, path_object_id
from emporium.db.mongo import PRODUCTS
from emporium.models.schemas import ProductIn

router = APIRouter()


def search_query(search: Optional[str]) -> dict:
    if not search:
        return {}
    pattern = {"$regex": re.escape(search), "$options": "i"}
    return {"$or": [{"name": pattern}, {"company": pattern}]}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductIn, db: Database = Depends(get_db)):
    return serialize.inserted(db[PRODUCTS].insert_one(payload.to_document()))


@router.get("")
def list_products(search: Optional[str] = None, db: Database = Depends(get_db)):
    return serialize.documents(db[PRODUCTS].find(search_query(search)))


@router.get("/{id}")
def get_product(oid: ObjectId = Depends(path_object_id), db: Database = Depends(get_db)):
    product = db[PRODUCTS].find_one({"_id": oid})
    if not product:
        raise APIError(status.HTTP_404_NOT_FOUND, "Product not found")
    return serialize.document(product)


@router.put("/{id}")
def update_product(payload: ProductIn, oid: ObjectId = Depends(path_object_id), db: Database = Depends(get_db)):
    return serialize.updated(db[PRODUCTS].update_one({"_id": oid}, {"$set": payload.to_document()}))


@router.delete("/{id}")
def delete_product(oid: ObjectId = Depends(path_object_id), db: Database = Depends(get_db)):
    return serialize.deleted(db[PRODUCTS].delete_one({"_id": oid}))

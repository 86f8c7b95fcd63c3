from bson import ObjectId
from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from emporium.api import serialize
from emporium.api.deps import get_db, path_object_id
from emporium.db.mongo import CART
from emporium.models.schemas import CartItemIn

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def add_to_cart(item: CartItemIn, db: Database = Depends(get_db)):
    # one document per add, duplicates are not merged
    return serialize.inserted(db[CART].insert_one(item.to_document()))


@router.get("/{buyerId}")
def list_cart_items(buyerId: str, db: Database = Depends(get_db)):
    return serialize.documents(db[CART].find({"buyerId": buyerId}))


@router.delete("/{id}")
def remove_cart_item(oid: ObjectId = Depends(path_object_id), db: Database = Depends(get_db)):
    return serialize.deleted(db[CART].delete_one({"_id": oid}))

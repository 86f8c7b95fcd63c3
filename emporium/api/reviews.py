from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from emporium.api import serialize
from emporium.api.deps import APIError, get_db
from emporium.db.mongo import REVIEWS
from emporium.models.schemas import ReviewIn
from emporium.services import reviews_service

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_review(payload: ReviewIn, db: Database = Depends(get_db)):
    review = payload.to_document()
    review["createdAt"] = datetime.now(timezone.utc)
    return serialize.inserted(db[REVIEWS].insert_one(review))


@router.get("/{coffeeId}")
def list_reviews(coffeeId: str, db: Database = Depends(get_db)):
    return serialize.documents(db[REVIEWS].find({"coffeeId": coffeeId}))


@router.delete("/{id}")
def delete_review(id: str, requesterId: Optional[str] = None, db: Database = Depends(get_db)):
    try:
        result = reviews_service.delete_review(db, id, requesterId)
    except reviews_service.ReviewDeletionError as e:
        raise APIError(e.status_code, e.message)
    return {"message": "Review deleted successfully", "result": serialize.deleted(result)}

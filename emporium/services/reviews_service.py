import logging
from typing import Optional

from fastapi import status
from pymongo.database import Database
from pymongo.results import DeleteResult

from emporium.db.mongo import PRODUCTS, REVIEWS, USERS, parse_object_id

logger = logging.getLogger(__name__)


class ReviewDeletionError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid ID"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class InvalidIdentifier(ReviewDeletionError):
    pass


class ReviewNotFound(ReviewDeletionError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Review not found"


class UnknownRequester(ReviewDeletionError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Unauthorized"


class CoffeeNotFound(ReviewDeletionError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Coffee not found"


class PermissionDenied(ReviewDeletionError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Permission denied: Only Admin or Seller can delete this review"


def can_delete(requester: dict, coffee: dict) -> bool:
    return requester.get("role") == "Admin" or requester.get("email") == coffee.get("sellerEmail")


def delete_review(db: Database, review_id: Optional[str], requester_id: Optional[str]) -> DeleteResult:
    """Delete a review on behalf of ``requester_id``.

    Only an Admin, or the seller whose email matches the reviewed product's
    ``sellerEmail``, may delete. Both ids are checked before any lookup.
    """
    review_oid = parse_object_id(review_id)
    requester_oid = parse_object_id(requester_id)
    if review_oid is None or requester_oid is None:
        raise InvalidIdentifier()

    review = db[REVIEWS].find_one({"_id": review_oid})
    if not review:
        raise ReviewNotFound()

    requester = db[USERS].find_one({"_id": requester_oid})
    if not requester:
        logger.warning("Review %s delete refused: unknown requester %s", review_id, requester_id)
        raise UnknownRequester()

    coffee_oid = parse_object_id(review.get("coffeeId"))
    coffee = db[PRODUCTS].find_one({"_id": coffee_oid}) if coffee_oid else None
    if not coffee:
        raise CoffeeNotFound()

    if not can_delete(requester, coffee):
        logger.warning("Review %s delete refused for requester %s", review_id, requester_id)
        raise PermissionDenied()

    result = db[REVIEWS].delete_one({"_id": review_oid})
    logger.info("Review %s deleted by %s", review_id, requester_id)
    return result

"""JSON-friendly renderings of MongoDB documents and write results."""
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List

from bson import ObjectId
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


def to_json(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        # pymongo hands back naive datetimes that are UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value


def document(doc: Dict[str, Any]) -> Dict[str, Any]:
    return to_json(doc)


def documents(docs: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [document(d) for d in docs]


def inserted(result: InsertOneResult) -> Dict[str, Any]:
    return {"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)}


def updated(result: UpdateResult) -> Dict[str, Any]:
    upserted_id = result.upserted_id
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedId": str(upserted_id) if upserted_id is not None else None,
        "upsertedCount": 1 if upserted_id is not None else 0,
    }


def deleted(result: DeleteResult) -> Dict[str, Any]:
    return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}

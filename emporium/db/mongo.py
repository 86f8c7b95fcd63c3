import logging
from typing import Optional
from urllib.parse import quote_plus

from bson import ObjectId
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.server_api import ServerApi

from emporium.core.config import DB_CLUSTER, DB_NAME, DB_PASSWORD, DB_USERS, MONGODB_URI

logger = logging.getLogger(__name__)

USERS = "users"
PRODUCTS = "products"
CART = "cart"
REVIEWS = "reviews"

client: Optional[MongoClient] = None


def parse_object_id(value) -> Optional[ObjectId]:
    if not value or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def build_uri() -> Optional[str]:
    if MONGODB_URI:
        return MONGODB_URI
    if not DB_USERS or not DB_PASSWORD:
        return None
    # Escape the username and password
    user, password = quote_plus(DB_USERS), quote_plus(DB_PASSWORD)
    return f"mongodb+srv://{user}:{password}@{DB_CLUSTER}/?retryWrites=true&w=majority&appName=Cluster0"


def get_client() -> MongoClient:
    global client
    if client is None:
        uri = build_uri()
        if not uri:
            raise RuntimeError("MongoDB connection not configured. See .env")
        client = MongoClient(uri, server_api=ServerApi("1", strict=True, deprecation_errors=True))
        logger.info("MongoDB client created for database %s", DB_NAME)
    return client


def get_database() -> Database:
    return get_client()[DB_NAME]


def close_client() -> None:
    global client
    if client is not None:
        client.close()
        client = None

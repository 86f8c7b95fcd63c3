from fastapi import APIRouter, Depends
from pymongo.database import Database

from emporium.db.mongo import PRODUCTS, REVIEWS, USERS
from emporium.api.deps import get_db
from emporium.models.schemas import AdminStats

router = APIRouter()


@router.get("/stats", response_model=AdminStats)
def stats(db: Database = Depends(get_db)):
    return AdminStats(
        totalBuyers=db[USERS].count_documents({"role": "Buyer"}),
        totalSellers=db[USERS].count_documents({"role": "Seller"}),
        totalProducts=db[PRODUCTS].count_documents({}),
        totalReviews=db[REVIEWS].count_documents({}),
    )

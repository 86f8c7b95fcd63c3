from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    # Documents are loosely typed: every field is stored as sent, nothing is required.
    model_config = ConfigDict(extra="allow")

    def to_document(self) -> dict:
        """Fields the client actually sent, extras included."""
        data = self.model_dump(exclude_unset=True)
        data.update(self.model_extra or {})
        return data


class UserIn(Document):
    email: Optional[Any] = Field(None, description="Checked for an existing user at registration")
    name: Optional[Any] = None
    role: Optional[Any] = Field(None, description="Buyer, Seller or Admin by convention")


class UserUpdate(UserIn):
    pass


class ProductIn(Document):
    name: Optional[Any] = None
    company: Optional[Any] = None
    sellerEmail: Optional[Any] = None


class CartItemIn(Document):
    buyerId: Optional[Any] = Field(None, description="Reference to users._id")


class ReviewIn(Document):
    coffeeId: Optional[Any] = Field(None, description="Reference to products._id")
    authorId: Optional[Any] = None


class AdminStats(BaseModel):
    totalBuyers: int
    totalSellers: int
    totalProducts: int
    totalReviews: int

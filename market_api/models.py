"""
models.py – Pydantic schemas cho request/response.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ── Auth ───────────────────────────────────────────────────────────────────────

class TokenRequest(BaseModel):
    """Payload login từ client; các field thêm được giữ nguyên trong token."""
    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=3, description="Email của user – claim chính của token")


class SuccessResponse(BaseModel):
    success: bool = True


# ── Food ───────────────────────────────────────────────────────────────────────

class FoodCreate(BaseModel):
    food_name:    str = Field(..., min_length=1, max_length=200)
    food_image:   Optional[str] = ""
    category:     Optional[str] = ""
    origin:       Optional[str] = ""
    description:  Optional[str] = ""
    price:        float = Field(default=0, ge=0)
    quantity:     int   = Field(default=0, ge=0, description="Số lượng còn trong kho")
    seller_name:  Optional[str] = ""
    seller_email: Optional[str] = Field(default=None, description="Mặc định: email của user đang login")


class FoodUpdate(BaseModel):
    """PATCH body. Field không gửi lên sẽ giữ nguyên; id bị bỏ qua."""
    model_config = ConfigDict(extra="ignore")

    food_name:   Optional[str]   = Field(default=None, min_length=1, max_length=200)
    food_image:  Optional[str]   = None
    category:    Optional[str]   = None
    origin:      Optional[str]   = None
    description: Optional[str]   = None
    price:       Optional[float] = Field(default=None, ge=0)
    quantity:    Optional[int]   = Field(default=None, ge=0)
    seller_name: Optional[str]   = None


class FoodItem(BaseModel):
    id: int
    food_name: str
    food_image: Optional[str] = ""
    category: Optional[str] = ""
    origin: Optional[str] = ""
    description: Optional[str] = ""
    price: float
    quantity: int
    order_count: int
    seller_name: Optional[str] = ""
    seller_email: str
    buyer_email: Optional[str] = None

    class Config:
        from_attributes = True


class CountResponse(BaseModel):
    count: int


class InsertResponse(BaseModel):
    acknowledged: bool = True
    inserted_id: int


class UpdateResponse(BaseModel):
    acknowledged: bool = True
    matched_count: int
    modified_count: int


class DeleteResponse(BaseModel):
    acknowledged: bool = True
    deleted_count: int


# ── Order ──────────────────────────────────────────────────────────────────────

class OrderRequest(BaseModel):
    food_id:     int = Field(..., description="ID của food muốn mua")
    quantity:    int = Field(..., gt=0, description="Số lượng mua")
    buyer_email: Optional[str] = Field(default=None, description="Mặc định: email của user đang login")
    buyer_name:  Optional[str] = ""


class OrderItem(BaseModel):
    id: int
    food_id: int
    buyer_email: str
    buyer_name: Optional[str] = ""
    quantity: int
    food_name: Optional[str] = ""
    food_image: Optional[str] = ""
    price: Optional[float] = 0
    seller_email: Optional[str] = ""
    ordered_at: datetime

    class Config:
        from_attributes = True


class OrderPlacementResponse(BaseModel):
    """Thành công → inserted_id; bị từ chối → message (vẫn HTTP 200)."""
    acknowledged: bool
    inserted_id: Optional[int] = None
    message: Optional[str] = None

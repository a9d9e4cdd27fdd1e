"""
db/models.py – SQLAlchemy ORM models cho bảng `foods` và `orders`.

Bảng được tạo lúc startup bằng Database.create_all() (không có migration).
"""
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Column, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class Food(Base):
    __tablename__ = "foods"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_foods_quantity_non_negative"),
        CheckConstraint("order_count >= 0", name="ck_foods_order_count_non_negative"),
    )

    id           = Column(Integer, primary_key=True, autoincrement=True)
    food_name    = Column(String,  nullable=False)
    food_image   = Column(String,  nullable=True, default="")
    category     = Column(String,  nullable=True, default="")
    origin       = Column(String,  nullable=True, default="")
    description  = Column(Text,    nullable=True, default="")
    price        = Column(Float,   nullable=False, default=0)
    quantity     = Column(Integer, nullable=False, default=0)
    order_count  = Column(Integer, nullable=False, default=0, index=True)
    seller_name  = Column(String,  nullable=True, default="")
    seller_email = Column(String,  nullable=False, index=True)
    buyer_email  = Column(String,  nullable=True, index=True)

    def __repr__(self) -> str:
        return f"<Food id={self.id} food_name={self.food_name!r} quantity={self.quantity}>"


class Order(Base):
    __tablename__ = "orders"

    id           = Column(Integer, primary_key=True, autoincrement=True)
    # Tham chiếu mềm: food có thể bị xoá, order vẫn giữ metadata
    food_id      = Column(Integer, nullable=False, index=True)
    buyer_email  = Column(String,  nullable=False, index=True)
    buyer_name   = Column(String,  nullable=True, default="")
    quantity     = Column(Integer, nullable=False)
    food_name    = Column(String,  nullable=True, default="")
    food_image   = Column(String,  nullable=True, default="")
    price        = Column(Float,   nullable=True, default=0)
    seller_email = Column(String,  nullable=True, default="")
    ordered_at   = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    def __repr__(self) -> str:
        return f"<Order id={self.id} food_id={self.food_id} buyer={self.buyer_email!r}>"

"""routes/orders.py – GET /orders, POST /orders, DELETE /orders/{id} (đều cần login)"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from ..core.auth import Identity, ensure_owner
from ..core.errors import ForbiddenError, NotFoundError
from ..core.orders import OrderPlaced
from ..deps import get_order_service, require_user
from ..models import DeleteResponse, OrderItem, OrderPlacementResponse, OrderRequest

router = APIRouter(tags=["Orders"])
logger = logging.getLogger(__name__)


@router.get("/orders", response_model=list[OrderItem])
async def list_orders(
    email: str = Query(..., description="Email người mua – phải trùng user đang login"),
    user: Identity = Depends(require_user),
):
    try:
        ensure_owner(user, email)
        return await get_order_service().list_for_buyer(email)
    except ForbiddenError:
        raise HTTPException(status_code=403, detail="forbidden access")
    except Exception as e:
        logger.exception("list_orders failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/orders", response_model=OrderPlacementResponse)
async def place_order(req: OrderRequest, user: Identity = Depends(require_user)):
    """
    Đặt hàng. Bị từ chối vì luật nghiệp vụ (tự mua food của mình, hết hàng)
    vẫn trả **200** với `acknowledged=false` và `message`.
    """
    buyer_email = req.buyer_email or user.email
    try:
        ensure_owner(user, buyer_email)
        result = await get_order_service().place(buyer_email, req.food_id, req.quantity, req.buyer_name or "")
    except ForbiddenError:
        raise HTTPException(status_code=403, detail="forbidden access")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception("place_order failed")
        raise HTTPException(status_code=500, detail=str(e))

    if isinstance(result, OrderPlaced):
        return OrderPlacementResponse(acknowledged=True, inserted_id=result.order_id)
    return OrderPlacementResponse(acknowledged=False, message=result.message)


@router.delete("/orders/{order_id}", response_model=DeleteResponse)
async def cancel_order(order_id: int, user: Identity = Depends(require_user)):
    try:
        return DeleteResponse(deleted_count=await get_order_service().cancel(order_id, user))
    except ForbiddenError:
        raise HTTPException(status_code=403, detail="forbidden access")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception("cancel_order failed")
        raise HTTPException(status_code=500, detail=str(e))

# orderbook/routers/orders_router.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from orderbook.queries import OrderQueries, OrderStatusQueries
from orderbook.routers.deps import get_order_queries, get_order_status_queries
from orderbook.routers.errors import unwrap
from orderbook.schemas.orders import OrderCreate, OrderOut, OrderStatusUpdate

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("/", response_model=OrderOut, status_code=201)
def create_order(body: OrderCreate, orders: OrderQueries = Depends(get_order_queries)):
    return orders.create(body.user_id, order_id=body.id)


@router.get("/", response_model=List[OrderOut])
def list_orders(orders: OrderQueries = Depends(get_order_queries)):
    return orders.show_all()


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: str, orders: OrderQueries = Depends(get_order_queries)):
    o = orders.show(order_id)
    if o is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return o


@router.get("/{order_id}/status", response_model=dict)
def get_order_status(order_id: str, oracle: OrderStatusQueries = Depends(get_order_status_queries)):
    return {"order_id": order_id, "is_done": oracle.is_finalized(order_id)}


@router.put("/{order_id}/status", response_model=OrderOut)
def update_order_status(
    order_id: str,
    body: OrderStatusUpdate,
    orders: OrderQueries = Depends(get_order_queries),
):
    return unwrap(orders.update_status(order_id, body.is_done), "Order")


@router.delete("/{order_id}", response_model=OrderOut)
def delete_order(order_id: str, orders: OrderQueries = Depends(get_order_queries)):
    return unwrap(orders.delete(order_id), "Order")

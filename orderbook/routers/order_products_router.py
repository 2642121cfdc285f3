# orderbook/routers/order_products_router.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from orderbook.queries import OrderProductQueries
from orderbook.routers.deps import get_order_product_queries
from orderbook.routers.errors import unwrap
from orderbook.schemas.order_products import OrderProductCreate, OrderProductOut, OrderProductUpdate

router = APIRouter(prefix="/orders/{order_id}/products", tags=["order-products"])


@router.post("/", response_model=OrderProductOut, status_code=201)
def add_product(
    order_id: str,
    body: OrderProductCreate,
    ledger: OrderProductQueries = Depends(get_order_product_queries),
):
    return unwrap(ledger.add_product(order_id, body.product_id, body.quantity), "Order product")


@router.get("/", response_model=List[OrderProductOut])
def list_products(order_id: str, ledger: OrderProductQueries = Depends(get_order_product_queries)):
    return ledger.show_all_products(order_id)


@router.get("/{product_id}", response_model=OrderProductOut)
def get_product(order_id: str, product_id: str, ledger: OrderProductQueries = Depends(get_order_product_queries)):
    item = ledger.show_product(order_id, product_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Order product not found")
    return item


@router.put("/{product_id}", response_model=OrderProductOut)
def update_product_quantity(
    order_id: str,
    product_id: str,
    body: OrderProductUpdate,
    ledger: OrderProductQueries = Depends(get_order_product_queries),
):
    return unwrap(ledger.update_product_quantity(order_id, product_id, body.quantity), "Order product")


@router.delete("/{product_id}", response_model=OrderProductOut)
def delete_product(order_id: str, product_id: str, ledger: OrderProductQueries = Depends(get_order_product_queries)):
    return unwrap(ledger.delete_product(order_id, product_id), "Order product")

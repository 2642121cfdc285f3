# orderbook/gateway/gateway_router.py
from fastapi import APIRouter

# business routers, wrapped under /gateway/*
from orderbook.routers.orders_router import router as orders_router
from orderbook.routers.order_products_router import router as order_products_router
from orderbook.routers.users_router import router as users_router
from orderbook.routers.dashboard_router import router as dashboard_router

gateway_router = APIRouter(prefix="/gateway", tags=["gateway"])

gateway_router.include_router(users_router)            # /gateway/users/...
gateway_router.include_router(order_products_router)   # /gateway/orders/{order_id}/products/...
gateway_router.include_router(orders_router)           # /gateway/orders/...
gateway_router.include_router(dashboard_router)        # /gateway/dashboard/...

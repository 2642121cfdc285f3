# orderbook/routers/dashboard_router.py
from typing import List

from fastapi import APIRouter, Depends

from orderbook.queries import DashboardQueries
from orderbook.routers.deps import get_dashboard_queries
from orderbook.schemas.dashboard import ProductsInOrderOut

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/products-in-orders", response_model=List[ProductsInOrderOut])
def products_in_orders(dashboard: DashboardQueries = Depends(get_dashboard_queries)):
    return dashboard.products_in_orders()

from routers.auth import router as auth_router
from routers.pharmacies import router as pharmacies_router
from routers.orders import router as orders_router
from routers.dashboard import router as dashboard_router

__all__ = [
    "auth_router",
    "pharmacies_router",
    "orders_router",
    "dashboard_router",
]

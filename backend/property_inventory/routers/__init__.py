"""API routers package"""
from property_inventory.routers.properties import router as properties_router

__all__ = [
    "properties_router",
]

"""Database models package"""
from property_inventory.models.property import Property

__all__ = [
    "Property",
]

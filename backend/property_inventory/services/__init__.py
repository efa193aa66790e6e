"""Services package"""
from property_inventory.services.valuation import MAX_TOTAL_PRICE, as_json_number, compute_total_price

__all__ = [
    "MAX_TOTAL_PRICE",
    "as_json_number",
    "compute_total_price",
]

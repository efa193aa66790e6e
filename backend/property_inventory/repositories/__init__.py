"""Storage repositories package"""
from property_inventory.repositories.outcome import Outcome, OutcomeStatus
from property_inventory.repositories.property_repository import PropertyRepository

__all__ = ["Outcome", "OutcomeStatus", "PropertyRepository"]

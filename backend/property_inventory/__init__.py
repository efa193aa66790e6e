"""Property Inventory API"""

"""Order use cases"""
from .place_order import PlaceOrder
from .dtos import PlaceOrderCommandDTO

__all__ = ["PlaceOrder", "PlaceOrderCommandDTO"]

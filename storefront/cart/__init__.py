"""Cart package: the shopping cart model."""
from .models import ShoppingCart

__all__ = [
    "ShoppingCart",
]

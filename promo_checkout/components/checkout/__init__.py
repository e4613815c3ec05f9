"""
Checkout component - Ordered promotion aggregation.
"""

from .component import price, run
from .models import CheckoutInput, CheckoutOutput, PromotionCharge

__all__ = [
    # Entry points
    "run",
    "price",
    # Models
    "CheckoutInput",
    "CheckoutOutput",
    "PromotionCharge",
]

"""
Pricer component - Unit price lookup and remainder charging.
"""

from .component import charge, run, unit_price
from .models import (
    InvalidPriceTableError,
    PriceCartInput,
    PriceCartOutput,
    PriceTable,
    UnknownSkuError,
)
from .ports import UnitPricerPort

__all__ = [
    # Entry points
    "run",
    "charge",
    "unit_price",
    # Models
    "PriceTable",
    "PriceCartInput",
    "PriceCartOutput",
    # Ports
    "UnitPricerPort",
    # Exceptions
    "UnknownSkuError",
    "InvalidPriceTableError",
]

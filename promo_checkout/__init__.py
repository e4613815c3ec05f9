"""
promo-checkout - Cart pricing under ordered promotion rules.
"""

__version__ = "0.1.0"

# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import (
    SchemaError,
    StateValidationError,
    InvalidArgumentError,
    CapacityExceededError,
)
from .items import Item

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    "InvalidArgumentError",
    "CapacityExceededError",
    # core models
    "Item",
]

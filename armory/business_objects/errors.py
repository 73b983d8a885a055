# -*- coding: utf-8 -*-
"""
Common exceptions for the business objects layer.
"""


class SchemaError(ValueError):
    """Raised when a catalog file (caret-delimited text/JSON) violates the expected schema."""


class StateValidationError(ValueError):
    """Raised when the in-memory state violates domain constraints."""


class InvalidArgumentError(ValueError):
    """Raised when a solver or helper is called with an argument outside its contract."""


class CapacityExceededError(ValueError):
    """Raised when an input is too large for the exhaustive solver to enumerate."""

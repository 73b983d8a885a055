# -*- coding: utf-8 -*-
"""
I/O helpers for loading item catalogs.

Two formats are supported:

- Caret-delimited text (lenient):
      description^cost^benefit        <- header row, always skipped
      new enchanted helmet^25^12.5
  A row with the wrong number of fields fails the whole load (SchemaError).
  A row whose numbers do not parse, or that violates the Item invariants,
  is skipped with a warning.

- JSON (strict):
      [{"description": "...", "cost": <int>, "benefit": <number>}, ...]
  Any bad element fails the load.

Both map directly to business_objects.items.Item.
"""

from __future__ import annotations
import json
import logging
from typing import List, Optional

from armory.business_objects.errors import SchemaError, StateValidationError
from armory.business_objects.items import Item

logger = logging.getLogger(__name__)

FIELD_COUNT = 3


def _parse_cost(field: str) -> Optional[int]:
    try:
        return int(field)
    except ValueError:
        pass
    # "25.0" style
    try:
        value = float(field)
    except ValueError:
        return None
    if not value.is_integer():
        return None
    return int(value)


def _parse_benefit(field: str) -> Optional[float]:
    try:
        return float(field)
    except ValueError:
        return None


def read_catalog_text(path: str, delimiter: str = "^") -> List[Item]:
    """
    Load all valid items from a delimited text catalog.

    Raises
    ------
    SchemaError
        If the file cannot be read, or a row does not have exactly three fields.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise SchemaError(f"{path}: failed to read catalog: {e}") from e

    items: List[Item] = []
    for line_number, line in enumerate(lines, start=1):
        if line_number == 1 or not line.strip():
            continue

        fields = line.split(delimiter)
        if len(fields) != FIELD_COUNT:
            raise SchemaError(
                f"{path}:{line_number}: invalid field count; want {FIELD_COUNT} "
                f"but got {len(fields)}. Line: {line}"
            )

        description, cost_field, benefit_field = fields
        cost = _parse_cost(cost_field)
        benefit = _parse_benefit(benefit_field)
        if cost is None or benefit is None:
            logger.warning("%s:%d: skipping row with unparsable numbers: %s", path, line_number, line)
            continue

        try:
            items.append(Item(description=description, cost=cost, benefit=benefit))
        except StateValidationError as e:
            logger.warning("%s:%d: skipping invalid row: %s", path, line_number, e)

    logger.debug("%s: loaded %d items", path, len(items))
    return items


def _require(obj: dict, key: str, path: str) -> object:
    if key not in obj:
        raise SchemaError(f"{path}: missing required key '{key}' in object {obj}")
    return obj[key]


def read_catalog_json(path: str) -> List[Item]:
    """
    Load items from a JSON array. Each element must have:
      - description (str)
      - cost (int)
      - benefit (number)
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e

    if not isinstance(data, list):
        raise SchemaError(f"{path}: expected a JSON array.")

    items: List[Item] = []
    for idx, obj in enumerate(data, start=1):
        if not isinstance(obj, dict):
            raise SchemaError(f"{path}[{idx}]: expected an object.")
        try:
            description = str(_require(obj, "description", path))
            cost = _require(obj, "cost", path)
            benefit = float(_require(obj, "benefit", path))  # type: ignore[arg-type]
            items.append(Item(description=description, cost=cost, benefit=benefit))  # type: ignore[arg-type]
        except (SchemaError, StateValidationError, TypeError, ValueError) as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e
    return items

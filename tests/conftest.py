# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import List

import pytest

from armory.business_objects.items import Item


@pytest.fixture
def classic_items() -> List[Item]:
    return [
        Item("a", 2, 3.0),
        Item("b", 3, 4.0),
        Item("c", 4, 5.0),
        Item("d", 5, 6.0),
    ]

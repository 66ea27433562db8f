"""Shared catalog fixtures."""

import pytest


@pytest.fixture
def catalog():
    return [
        {"id": 1, "name": "Red Running Shoe", "category": "Footwear", "price": 50},
        {"id": 2, "name": "Blue Running Shoe", "category": "Footwear", "price": 55},
        {"id": 3, "name": "Laptop Stand", "category": "Office", "price": 20},
    ]

"""Pytest fixtures for the pricing engine."""

import pytest

from pricing_engine.inventory import Inventory


@pytest.fixture
def inventory() -> Inventory:
    inventory = Inventory()

    inventory.register("Green Tea", "0.79", {"get_one_free": 2})
    inventory.register("Black Coffee", "2.99", {"package": {2: 20}})
    inventory.register("Milk", "1.79", {"threshold": {3: 30}})
    inventory.register("Cereal", "2.49")  # No promotion

    inventory.register_coupon("TEATIME", {"percent": 20})
    inventory.register_coupon("FIVE", {"amount": "5.00"})

    return inventory


@pytest.fixture
def cart(inventory):
    return inventory.new_cart()

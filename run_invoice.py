from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from pricing_engine.errors import PricingError
from pricing_engine.inventory import Inventory


def seed(inventory: Inventory) -> None:
    inventory.register("Green Tea", "0.79", {"get_one_free": 2})
    inventory.register("Black Coffee", "2.99", {"package": {2: 20}})
    inventory.register("Milk", "1.79", {"threshold": {3: 30}})
    inventory.register("Cereal", "2.49")

    inventory.register_coupon("TEATIME", {"percent": 20})
    inventory.register_coupon("FIVE", {"amount": "5.00"})


def parse_item(value: str) -> Tuple[str, int]:
    name, sep, count = value.rpartition(":")
    if not sep:
        return value, 1
    try:
        return name, int(count)
    except ValueError:
        raise argparse.ArgumentTypeError(f"bad item count in {value!r}") from None


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Price a demo cart and print its invoice.")
    p.add_argument("--item", type=parse_item, action="append", default=[], metavar="NAME[:COUNT]")
    p.add_argument("--coupon", type=str, default=None)
    p.add_argument("--verbose", action="store_true", help="Show registration and cart logs")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(message)s")

    inventory = Inventory()
    seed(inventory)

    cart = inventory.new_cart()
    try:
        for name, count in args.item:
            cart.add(name, count)
        if args.coupon:
            cart.use(args.coupon)
    except PricingError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(cart.invoice())
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Pizzas and the decorator chain that prices them.

A priced item is one of three immutable variants:

- ``BasePizza`` — a named pizza with a fixed price, the end of every chain;
- ``Crust`` — wraps one inner item, adds a surcharge and ``, <name>``;
- ``Topping`` — wraps one inner item, adds a surcharge and `` + <name>``.

Each wrapper owns exactly one inner item that was already built, so a
chain is always finite and acyclic.  ``cost()`` and ``description()``
recurse down the chain.  Because every link is frozen, a chain can be
shared between orders or copied with no clone support of its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pizzeria.domain.model.value_objects import Money

# ---------------------------------------------------------------------------
# Default prices
# ---------------------------------------------------------------------------
MARGHERITA_PRICE = Money.of("120.00")
FARMHOUSE_PRICE = Money.of("150.00")

THIN_CRUST_SURCHARGE = Money.of("20.00")
CHEESE_BURST_SURCHARGE = Money.of("50.00")

CHEESE_SURCHARGE = Money.of("10.00")
OLIVES_SURCHARGE = Money.of("15.00")
JALAPENOS_SURCHARGE = Money.of("12.00")


@dataclass(frozen=True)
class BasePizza:
    name: str
    price: Money

    def description(self) -> str:
        return self.name

    def cost(self) -> Money:
        return self.price


@dataclass(frozen=True)
class Crust:
    """Crust style wrapped around an inner item."""

    inner: PricedItem
    name: str
    surcharge: Money

    def description(self) -> str:
        return f"{self.inner.description()}, {self.name}"

    def cost(self) -> Money:
        return self.inner.cost() + self.surcharge


@dataclass(frozen=True)
class Topping:
    """Topping wrapped around an inner item."""

    inner: PricedItem
    name: str
    surcharge: Money

    def description(self) -> str:
        return f"{self.inner.description()} + {self.name}"

    def cost(self) -> Money:
        return self.inner.cost() + self.surcharge


PricedItem = Union[BasePizza, Crust, Topping]


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def margherita(price: Money = MARGHERITA_PRICE) -> BasePizza:
    return BasePizza("Margherita", price)


def farmhouse(price: Money = FARMHOUSE_PRICE) -> BasePizza:
    return BasePizza("Farmhouse", price)


def thin_crust(inner: PricedItem) -> Crust:
    return Crust(inner, "Thin Crust", THIN_CRUST_SURCHARGE)


def cheese_burst(inner: PricedItem) -> Crust:
    return Crust(inner, "CheeseBurst Crust", CHEESE_BURST_SURCHARGE)


def cheese(inner: PricedItem, price: Money = CHEESE_SURCHARGE) -> Topping:
    return Topping(inner, "Cheese", price)


def olives(inner: PricedItem, price: Money = OLIVES_SURCHARGE) -> Topping:
    return Topping(inner, "Olives", price)


def jalapenos(inner: PricedItem, price: Money = JALAPENOS_SURCHARGE) -> Topping:
    return Topping(inner, "Jalapenos", price)

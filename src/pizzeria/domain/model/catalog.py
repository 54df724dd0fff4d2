"""The fixed menu: what a customer can order by name.

Selections are looked up by their exact, lower-case name.  The menu
sections (bases, crusts, toppings) are built from the same builders so
displayed prices always match what an order is charged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pizzeria.domain.exceptions import EntityNotFoundError
from pizzeria.domain.model import pizza
from pizzeria.domain.model.pizza import PricedItem
from pizzeria.domain.model.value_objects import Money

SELECTIONS: dict[str, Callable[[], PricedItem]] = {
    "margherita": pizza.margherita,
    "farmhouse": pizza.farmhouse,
    "thin_margherita": lambda: pizza.thin_crust(pizza.margherita()),
    "cheese_burst_farmhouse": lambda: pizza.cheese_burst(pizza.farmhouse()),
}


@dataclass(frozen=True)
class MenuEntry:
    name: str
    price: Money


def is_selection(name: str) -> bool:
    return name in SELECTIONS


def build(name: str) -> PricedItem:
    """Build a fresh priced item for a selection name."""
    try:
        factory = SELECTIONS[name]
    except KeyError:
        raise EntityNotFoundError(f"Pizza not on the menu: '{name}'") from None
    return factory()


def menu_sections() -> dict[str, list[MenuEntry]]:
    """Bases, crusts and toppings with their prices or surcharges."""
    base = pizza.BasePizza("", Money.zero())
    return {
        "Pizzas": [
            MenuEntry(p.name, p.price) for p in (pizza.margherita(), pizza.farmhouse())
        ],
        "Crusts": [
            MenuEntry(c.name, c.surcharge)
            for c in (pizza.thin_crust(base), pizza.cheese_burst(base))
        ],
        "Toppings": [
            MenuEntry(t.name, t.surcharge)
            for t in (pizza.cheese(base), pizza.olives(base), pizza.jalapenos(base))
        ],
    }


def selection_entries() -> list[MenuEntry]:
    """Orderable selections with their full price."""
    return [MenuEntry(name, build(name).cost()) for name in SELECTIONS]

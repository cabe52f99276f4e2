"""Parsing of ``key:order`` sort expressions."""

from dataclasses import dataclass
from enum import Enum


class Order(str, Enum):
    """Sort direction."""

    ASCENDING = "ASC"
    DESCENDING = "DESC"

    def __str__(self):
        return self.value

    def flipped(self):
        """Return the opposite direction."""
        return Order.ASCENDING if self is Order.DESCENDING else Order.DESCENDING


@dataclass(frozen=True)
class Sort:
    """One sort key with its direction and the lower-cased text it came from."""

    key: str
    order: Order = Order.ASCENDING
    original: str = ""


class Sorts(list):
    """An ordered list of :class:`Sort` items."""

    def order_by(self, reverse=False):
        """Render an ORDER BY clause body, optionally with every direction flipped."""
        return ", ".join(
            f"{item.key} {(item.order.flipped() if reverse else item.order).value}"
            for item in self
        )

    def as_dict(self):
        """Map each key to its direction."""
        return {item.key: item.order.value for item in self}

    def desc(self):
        """Return True if any key sorts descending."""
        return any(item.order is Order.DESCENDING for item in self)


def new_sorts(qs):
    """Parse ``key1:asc,key2:desc,key3`` into :class:`Sorts`; missing orders are ascending."""
    result = Sorts()
    for part in qs.split(","):
        pieces = part.split(":")
        order = Order.ASCENDING
        if len(pieces) == 2 and pieces[1].lower() == "desc":
            order = Order.DESCENDING
        result.append(Sort(key=pieces[0].lower(), order=order, original=part.lower()))
    return result
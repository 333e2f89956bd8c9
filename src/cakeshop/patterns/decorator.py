"""
Decorator pattern for cakes

A decorated cake is a single CakeRecord holding the bare cake data plus the
ordered list of applied decorations. Price and description are computed from
that list, so every decoration type shares one rendering path.
"""
import logging
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from ..exceptions import UnknownDecoration
from .cakes import CakeKind, CakeSize, DecorationKind, coerce_member

logger = logging.getLogger(__name__)

# Surcharge table, read when a decoration is applied
DECORATION_SURCHARGES: Dict[DecorationKind, Decimal] = {
    DecorationKind.CHOCOLATE_CHIPS: Decimal("2.50"),
    DecorationKind.CREAM: Decimal("2.00"),
    DecorationKind.SKITTLES: Decimal("1.50"),
}


@dataclass(frozen=True)
class AppliedDecoration:
    """Decoration as it was priced and named when applied"""
    kind: DecorationKind
    name: str
    surcharge: Decimal


@dataclass(frozen=True)
class CakeRecord:
    """One cake order, bare or decorated"""
    order_id: str
    kind: CakeKind
    size: CakeSize
    base_price: Decimal
    decorations: Tuple[AppliedDecoration, ...] = ()
    customer: Optional[str] = field(default=None, compare=False)

    @property
    def is_decorated(self) -> bool:
        return bool(self.decorations)

    @property
    def decoration_names(self) -> List[str]:
        return [d.name for d in self.decorations]

    def total_price(self) -> Decimal:
        return total_price(self)

    def describe(self) -> str:
        return describe(self)


def surcharge_of(decoration) -> Decimal:
    kind = _resolve_decoration(decoration)
    return DECORATION_SURCHARGES[kind]


def _resolve_decoration(decoration) -> DecorationKind:
    if decoration is None:
        raise UnknownDecoration(decoration)
    try:
        kind = coerce_member(DecorationKind, decoration)
    except ValueError:
        raise UnknownDecoration(decoration) from None
    if kind not in DECORATION_SURCHARGES:
        raise UnknownDecoration(decoration)
    return kind


def apply_decoration(cake: CakeRecord, decoration) -> CakeRecord:
    """Returns a new cake wrapping `cake` with one more decoration"""
    kind = _resolve_decoration(decoration)
    applied = AppliedDecoration(
        kind=kind,
        name=kind.display_name,
        surcharge=DECORATION_SURCHARGES[kind],
    )
    return replace(cake, decorations=cake.decorations + (applied,))


def total_price(cake: CakeRecord) -> Decimal:
    return cake.base_price + sum((d.surcharge for d in cake.decorations), Decimal("0"))


def join_names(names: List[str]) -> str:
    """English list: "A", "A and B", "A, B, and C"."""
    if len(names) <= 1:
        return "".join(names)
    if len(names) == 2:
        return f"{names[0]} and {names[1]}"
    return ", ".join(names[:-1]) + ", and " + names[-1]


def describe(cake: CakeRecord) -> str:
    description = f"Order #{cake.order_id}: {cake.kind.display_name} ({cake.size.display_name})"

    names = []
    for decoration in cake.decorations:
        if not decoration.name or not decoration.name.strip():
            logger.warning(
                "Order %s has a decoration without a name (%s); leaving it out of the description",
                cake.order_id, decoration.kind,
            )
            continue
        names.append(decoration.name)

    if names:
        description += " with " + join_names(names)
    return description

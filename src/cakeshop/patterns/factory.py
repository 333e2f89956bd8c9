"""
Factory pattern: the catalog that prices and mints base cakes
"""
import threading
from decimal import Decimal, InvalidOperation
from typing import Dict, Tuple

from ..exceptions import InvalidRequest, UnknownCombination
from .cakes import CakeKind, CakeSize, coerce_member
from .decorator import CakeRecord

PriceKey = Tuple[CakeKind, CakeSize]

DEFAULT_PRICES: Dict[PriceKey, Decimal] = {
    (CakeKind.APPLE, CakeSize.SMALL): Decimal("8.00"),
    (CakeKind.APPLE, CakeSize.MEDIUM): Decimal("10.00"),
    (CakeKind.APPLE, CakeSize.LARGE): Decimal("12.00"),
    (CakeKind.CHEESE, CakeSize.SMALL): Decimal("11.00"),
    (CakeKind.CHEESE, CakeSize.MEDIUM): Decimal("13.00"),
    (CakeKind.CHEESE, CakeSize.LARGE): Decimal("15.00"),
    (CakeKind.CHOCOLATE, CakeSize.SMALL): Decimal("10.00"),
    (CakeKind.CHOCOLATE, CakeSize.MEDIUM): Decimal("12.00"),
    (CakeKind.CHOCOLATE, CakeSize.LARGE): Decimal("14.00"),
}

CENTS = Decimal("0.01")


def to_price(value) -> Decimal:
    """Normalizes a price to two decimal places"""
    try:
        price = Decimal(str(value)).quantize(CENTS)
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidRequest(f"Invalid price: {value!r}") from None
    if not price.is_finite():
        raise InvalidRequest(f"Invalid price: {value!r}")
    if price < 0:
        raise InvalidRequest(f"Price cannot be negative: {value!r}")
    return price


def resolve_kind(kind) -> CakeKind:
    if kind is None:
        raise InvalidRequest("Cake type cannot be null")
    try:
        return coerce_member(CakeKind, kind)
    except ValueError as e:
        raise InvalidRequest(str(e)) from None


def resolve_size(size) -> CakeSize:
    if size is None:
        raise InvalidRequest("Cake size cannot be null")
    try:
        return coerce_member(CakeSize, size)
    except ValueError as e:
        raise InvalidRequest(str(e)) from None


class CakeCatalog:
    """Price table and order number source for base cakes"""

    def __init__(self):
        self._lock = threading.Lock()
        self._prices: Dict[PriceKey, Decimal] = dict(DEFAULT_PRICES)
        self._counters: Dict[CakeKind, int] = {kind: 0 for kind in CakeKind}

    def price_of(self, kind, size) -> Decimal:
        key = (resolve_kind(kind), resolve_size(size))
        with self._lock:
            return self._lookup(key)

    def _lookup(self, key: PriceKey) -> Decimal:
        try:
            return self._prices[key]
        except KeyError:
            raise UnknownCombination(key[0], key[1]) from None

    def set_price(self, kind, size, new_price) -> Decimal:
        """Updates one row; cakes already minted keep the price they were given"""
        key = (resolve_kind(kind), resolve_size(size))
        price = to_price(new_price)
        with self._lock:
            self._prices[key] = price
        return price

    def remove_price(self, kind, size) -> None:
        key = (resolve_kind(kind), resolve_size(size))
        with self._lock:
            self._prices.pop(key, None)

    def reset_to_defaults(self) -> None:
        with self._lock:
            self._prices = dict(DEFAULT_PRICES)

    def price_table(self) -> Dict[PriceKey, Decimal]:
        with self._lock:
            return dict(self._prices)

    def mint_cake(self, kind, size) -> CakeRecord:
        """Creates a bare cake with the next order number for its kind"""
        kind = resolve_kind(kind)
        size = resolve_size(size)
        with self._lock:
            base_price = self._lookup((kind, size))
            self._counters[kind] += 1
            number = self._counters[kind]
        order_id = f"{kind.code}-{size.code}-{number:03d}"
        return CakeRecord(order_id=order_id, kind=kind, size=size, base_price=base_price)

    def count_for_kind(self, kind) -> int:
        kind = resolve_kind(kind)
        with self._lock:
            return self._counters[kind]

    def reset_counters(self) -> None:
        with self._lock:
            self._counters = {kind: 0 for kind in CakeKind}

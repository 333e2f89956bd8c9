"""
Singleton pattern: the ordering system that every order goes through

OrderCoordinator can be built directly and handed to whoever needs it.
For a process-wide instance call initialize() once at startup, or
get_instance() which creates it lazily under a lock.
"""
import logging
import threading
from dataclasses import replace
from typing import Iterable, List, Optional

from ..exceptions import InvalidRequest, NullSink
from .decorator import CakeRecord, apply_decoration
from .factory import CakeCatalog, resolve_kind, resolve_size

logger = logging.getLogger(__name__)


class OrderCoordinator:
    """Mints base cakes, applies decorations and notifies the registered sinks"""

    def __init__(self, catalog: Optional[CakeCatalog] = None):
        self._catalog = catalog or CakeCatalog()
        self._sinks: List = []
        self._sinks_lock = threading.RLock()

    @property
    def catalog(self) -> CakeCatalog:
        return self._catalog

    def register_sink(self, sink) -> None:
        if sink is None:
            raise NullSink("Observer cannot be null")
        if not callable(getattr(sink, "notify", None)):
            raise NullSink(f"{type(sink).__name__} has no notify() method")
        with self._sinks_lock:
            if any(s is sink for s in self._sinks):
                return
            self._sinks.append(sink)
        logger.info("Observer registered: %s", type(sink).__name__)

    def remove_sink(self, sink) -> None:
        with self._sinks_lock:
            self._sinks = [s for s in self._sinks if s is not sink]

    def sink_count(self) -> int:
        with self._sinks_lock:
            return len(self._sinks)

    def _notify_sinks(self, cake: CakeRecord) -> None:
        with self._sinks_lock:
            sinks = list(self._sinks)
        for sink in sinks:
            sink.notify(cake)

    def place_order(self, kind, size, decorations: Optional[Iterable], customer: Optional[str] = None) -> CakeRecord:
        """
        Places one order and returns the finished cake.

        Validation errors are raised before anything is minted. An unknown
        decoration stops the order after the base cake was minted: its order
        number is spent and no sink is notified.
        """
        kind = resolve_kind(kind)
        size = resolve_size(size)
        if decorations is None:
            raise InvalidRequest("Decorations list cannot be null")
        if isinstance(decorations, str):
            raise InvalidRequest("Decorations must be a list, not a string")
        try:
            decorations = list(decorations)
        except TypeError:
            raise InvalidRequest(f"Decorations must be a list, got {type(decorations).__name__}") from None

        logger.info(
            "Processing new order for %s: %s (%s), decorations: %s",
            customer, kind.display_name, size.display_name,
            [getattr(d, "name", d) for d in decorations] or "None",
        )

        cake = self._catalog.mint_cake(kind, size)
        for decoration in decorations:
            cake = apply_decoration(cake, decoration)
        if customer is not None:
            cake = replace(cake, customer=customer)

        logger.info("Order completed: %s (total $%.2f)", cake.describe(), cake.total_price())
        self._notify_sinks(cake)
        return cake


_instance: Optional[OrderCoordinator] = None
_instance_lock = threading.Lock()


def initialize(catalog: Optional[CakeCatalog] = None) -> OrderCoordinator:
    """Creates the process-wide coordinator; later calls return the same one"""
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = OrderCoordinator(catalog)
        elif catalog is not None and catalog is not _instance.catalog:
            logger.warning("Ordering system already initialized; ignoring the catalog passed in")
        return _instance


def get_instance() -> OrderCoordinator:
    if _instance is None:
        return initialize()
    return _instance


def reset_instance() -> None:
    """Drops the process-wide coordinator"""
    global _instance
    with _instance_lock:
        _instance = None

from abc import ABC, abstractmethod
import threading
from typing import Callable, Dict, List

from sqlalchemy.orm import Session

from ..database.crud import OrderHistoryRepository
from .decorator import CakeRecord
from .factory import CakeCatalog


class OrderObserver(ABC):
    """Sink for finished orders; must not modify the cake it receives"""

    @abstractmethod
    def notify(self, cake: CakeRecord) -> None:
        pass


class CustomerDashboard(OrderObserver):
    """Shows each finished order to the customer"""

    def __init__(self):
        self._lock = threading.Lock()
        self._completed: List[CakeRecord] = []

    def notify(self, cake):
        if cake is None:
            return
        with self._lock:
            self._completed.append(cake)
        print(cake.describe())

    def completed_orders(self) -> List[CakeRecord]:
        with self._lock:
            return list(self._completed)

    def order_count(self) -> int:
        with self._lock:
            return len(self._completed)

    def clear(self):
        with self._lock:
            self._completed.clear()


class ManagerDashboard(OrderObserver):
    """Shows the running number of cakes sold per kind"""

    def __init__(self, catalog: CakeCatalog):
        self._catalog = catalog
        self._lock = threading.Lock()
        self._latest: Dict[str, int] = {}

    def notify(self, cake):
        if cake is None:
            return
        count = self._catalog.count_for_kind(cake.kind)
        name = cake.kind.display_name
        with self._lock:
            self._latest[name] = count
        print(f"{name} – {count}")

    def latest_sales(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._latest)


class OrderHistoryObserver(OrderObserver):
    """Records every finished order in the order_history table"""

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def notify(self, cake):
        if cake is None:
            return
        db = self._session_factory()
        try:
            OrderHistoryRepository(db).record(cake)
        finally:
            db.close()

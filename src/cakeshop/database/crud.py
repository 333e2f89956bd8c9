from sqlalchemy.orm import Session
from sqlalchemy import desc
from typing import List, Optional

from .models import OrderHistory


class BaseRepository:
    """Base repository with CRUD operations"""

    def __init__(self, db: Session, model):
        self.db = db
        self.model = model

    def create(self, obj):
        """Creates a new row"""
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj


class OrderHistoryRepository(BaseRepository):
    """Repository for finished orders"""

    def __init__(self, db: Session):
        super().__init__(db, OrderHistory)

    def record(self, cake) -> OrderHistory:
        """Stores a finished cake"""
        entry = OrderHistory(
            order_id=cake.order_id,
            kind=cake.kind.value,
            size=cake.size.value,
            customer=cake.customer,
            decorations=cake.decoration_names,
            base_price=cake.base_price,
            total_price=cake.total_price(),
            description=cake.describe(),
        )
        return self.create(entry)

    def get_by_order_id(self, order_id: str) -> List[OrderHistory]:
        """Every row stored under an order id, newest first"""
        return (
            self.db.query(OrderHistory)
            .filter(OrderHistory.order_id == order_id)
            .order_by(desc(OrderHistory.id))
            .all()
        )

    def list_recent(self, limit: int = 20, kind: Optional[str] = None) -> List[OrderHistory]:
        """Newest orders first, optionally for one cake kind"""
        query = self.db.query(OrderHistory)
        if kind:
            query = query.filter(OrderHistory.kind == kind)
        return query.order_by(desc(OrderHistory.id)).limit(limit).all()

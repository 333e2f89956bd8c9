"""
SQLAlchemy models
"""
from sqlalchemy import Column, Integer, String, Numeric, DateTime, Text, JSON
from datetime import datetime

from .config import Base


class OrderHistory(Base):
    __tablename__ = "order_history"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(String(20), nullable=False, index=True)  # Counters restart with the process, so not unique
    kind = Column(String(20), nullable=False)
    size = Column(String(10), nullable=False)
    customer = Column(String(100))
    decorations = Column(JSON, default=list)  # Display names in application order
    base_price = Column(Numeric(10, 2), nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)
    description = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

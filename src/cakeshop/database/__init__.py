"""
Database module
"""
from .config import init_db, SessionLocal, Base, engine
from .models import OrderHistory
from .crud import BaseRepository, OrderHistoryRepository

__all__ = [
    'init_db',
    'SessionLocal',
    'Base',
    'engine',
    'OrderHistory',
    'BaseRepository',
    'OrderHistoryRepository',
]

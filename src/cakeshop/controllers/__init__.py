"""
MVC controllers of the cake shop
"""

from .order_controller import OrderController
from .catalog_controller import CatalogController
from .dashboard_controller import DashboardController

__all__ = [
    'OrderController',
    'CatalogController',
    'DashboardController'
]

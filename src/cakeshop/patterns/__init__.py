"""
GoF patterns of the cake shop
"""
from .cakes import CakeKind, CakeSize, DecorationKind
from .decorator import (
    AppliedDecoration, CakeRecord, DECORATION_SURCHARGES,
    apply_decoration, describe, surcharge_of, total_price,
)
from .factory import CakeCatalog, DEFAULT_PRICES
from .observer import CustomerDashboard, ManagerDashboard, OrderHistoryObserver, OrderObserver
from .singleton import OrderCoordinator, get_instance, initialize, reset_instance

__all__ = [
    # Vocabularies
    'CakeKind',
    'CakeSize',
    'DecorationKind',

    # Decorator Pattern
    'AppliedDecoration',
    'CakeRecord',
    'DECORATION_SURCHARGES',
    'apply_decoration',
    'describe',
    'surcharge_of',
    'total_price',

    # Factory Pattern
    'CakeCatalog',
    'DEFAULT_PRICES',

    # Observer Pattern
    'OrderObserver',
    'CustomerDashboard',
    'ManagerDashboard',
    'OrderHistoryObserver',

    # Singleton Pattern
    'OrderCoordinator',
    'get_instance',
    'initialize',
    'reset_instance',
]

"""
FastAPI application of the Cake Shop
MVC controllers on top of the GoF patterns
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from typing import Callable, Optional
from sqlalchemy.orm import Session

from . import __version__
from .config import get_settings
from .database import SessionLocal, init_db
from .controllers import OrderController, CatalogController, DashboardController
from .patterns.observer import CustomerDashboard, ManagerDashboard, OrderHistoryObserver
from .patterns.singleton import OrderCoordinator, initialize


def create_app(
    coordinator: Optional[OrderCoordinator] = None,
    session_factory: Optional[Callable[[], Session]] = None,
    persist_history: Optional[bool] = None,
) -> FastAPI:
    """
    Builds the application around an ordering system.

    Without a coordinator the process-wide one is used. Order history is
    stored through `session_factory`, or through the configured database
    when history is enabled and no factory is given.
    """
    settings = get_settings()
    if coordinator is None:
        coordinator = initialize()
    if persist_history is None:
        persist_history = settings.persist_history

    if persist_history and session_factory is None:
        init_db()
        session_factory = SessionLocal
    if not persist_history:
        session_factory = None

    # Observers, in notification order
    customer_dashboard = CustomerDashboard()
    manager_dashboard = ManagerDashboard(coordinator.catalog)
    coordinator.register_sink(customer_dashboard)
    coordinator.register_sink(manager_dashboard)
    if session_factory is not None:
        coordinator.register_sink(OrderHistoryObserver(session_factory))

    app = FastAPI(
        title="Cake Shop",
        description="""
        Cake ordering system built on GoF patterns:

        - 🏭 Factory: base cakes minted from the catalog
        - 🎨 Decorator: cream, chocolate chips and skittles on top
        - 🔒 Singleton: one ordering system for every order
        - 👁️ Observer: customer and manager dashboards, order history
        """,
        version=__version__
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    order_controller = OrderController(coordinator, customer_dashboard)
    catalog_controller = CatalogController(coordinator.catalog)
    dashboard_controller = DashboardController(manager_dashboard, customer_dashboard, session_factory)

    app.include_router(order_controller.router)
    app.include_router(catalog_controller.router)
    app.include_router(dashboard_controller.router)

    app.state.coordinator = coordinator
    app.state.customer_dashboard = customer_dashboard
    app.state.manager_dashboard = manager_dashboard

    @app.get("/")
    async def root():
        """System information"""
        return {
            "message": "🎂 Cake Shop - GoF Patterns",
            "version": __version__,
            "patterns": {
                "factory": "Base cakes and order numbers",
                "decorator": "Cake decorations",
                "singleton": "Ordering system",
                "observer": "Dashboards and order history",
            },
            "endpoints": {
                "docs": "/docs",
                "orders": "/orders/*",
                "catalog": "/catalog/*",
                "dashboard": "/dashboard/*",
            }
        }

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "observers": coordinator.sink_count(),
            "history": session_factory is not None,
        }

    return app

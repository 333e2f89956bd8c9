"""
Controller for the dashboards (MVC)
Cake Shop - GoF Patterns
"""
from fastapi import APIRouter, HTTPException, Depends, status, Query
from pydantic import BaseModel
from typing import Callable, Dict, List, Optional
from datetime import datetime
from sqlalchemy.orm import Session

from ..database.crud import OrderHistoryRepository
from ..patterns.observer import CustomerDashboard, ManagerDashboard


class ManagerDashboardResponse(BaseModel):
    """Latest sales count per cake kind"""
    latest_sales: Dict[str, int]
    orders_shown_to_customers: int


class HistoryResponse(BaseModel):
    order_id: str
    kind: str
    size: str
    customer: Optional[str]
    decorations: List[str]
    base_price: float
    total_price: float
    description: str
    created_at: datetime

    class Config:
        from_attributes = True


class DashboardController:
    """Controller exposing the observers registered on the ordering system"""

    def __init__(
        self,
        manager_dashboard: ManagerDashboard,
        customer_dashboard: CustomerDashboard,
        session_factory: Optional[Callable[[], Session]] = None,
    ):
        self.router = APIRouter(prefix="/dashboard", tags=["Dashboards"])
        self.manager_dashboard = manager_dashboard
        self.customer_dashboard = customer_dashboard
        self.session_factory = session_factory
        self._setup_routes()

    def get_db(self):
        """Dependency that yields a session for the history table"""
        if self.session_factory is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Order history is disabled"
            )
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def _setup_routes(self):
        """Sets up the controller routes"""

        @self.router.get("/manager", response_model=ManagerDashboardResponse)
        async def manager_dashboard():
            return ManagerDashboardResponse(
                latest_sales=self.manager_dashboard.latest_sales(),
                orders_shown_to_customers=self.customer_dashboard.order_count(),
            )

        @self.router.get("/history", response_model=List[HistoryResponse])
        async def order_history(
            kind: Optional[str] = Query(None, description="Filter by cake kind"),
            limit: int = Query(20, ge=1, le=100),
            db: Session = Depends(self.get_db)
        ):
            """Finished orders stored by the history observer, newest first"""
            try:
                return OrderHistoryRepository(db).list_recent(limit=limit, kind=kind)
            except Exception as e:
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=f"Error reading order history: {str(e)}"
                )

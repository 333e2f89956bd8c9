"""
Controller for cake orders (MVC)
Cake Shop - GoF Patterns
"""
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field
from typing import List, Optional

from ..exceptions import InvalidRequest, UnknownCombination, UnknownDecoration
from ..patterns.cakes import DecorationKind
from ..patterns.decorator import CakeRecord, DECORATION_SURCHARGES
from ..patterns.observer import CustomerDashboard
from ..patterns.singleton import OrderCoordinator


class OrderRequest(BaseModel):
    """Schema for placing an order"""
    kind: str = Field(..., description="Cake kind: apple, cheese, chocolate")
    size: str = Field(..., description="Cake size: small, medium, large")
    decorations: List[str] = Field(default_factory=list)
    customer: Optional[str] = Field(None, max_length=100)

    class Config:
        json_schema_extra = {
            "example": {
                "kind": "chocolate",
                "size": "medium",
                "decorations": ["cream", "chocolate_chips", "skittles"],
                "customer": "Bob Johnson"
            }
        }


class CakeResponse(BaseModel):
    """Response schema for a finished cake"""
    order_id: str
    kind: str
    size: str
    customer: Optional[str]
    decorations: List[str]
    base_price: float
    total_price: float
    description: str


class DecorationResponse(BaseModel):
    kind: str
    name: str
    surcharge: float


def cake_to_response(cake: CakeRecord) -> CakeResponse:
    return CakeResponse(
        order_id=cake.order_id,
        kind=cake.kind.value,
        size=cake.size.value,
        customer=cake.customer,
        decorations=cake.decoration_names,
        base_price=float(cake.base_price),
        total_price=float(cake.total_price()),
        description=cake.describe(),
    )


class OrderController:
    """Controller for placing and listing orders"""

    def __init__(self, coordinator: OrderCoordinator, customer_dashboard: CustomerDashboard):
        self.router = APIRouter(prefix="/orders", tags=["Orders"])
        self.coordinator = coordinator
        self.customer_dashboard = customer_dashboard
        self._setup_routes()

    def _setup_routes(self):
        """Sets up the controller routes"""

        @self.router.post("/", response_model=CakeResponse, status_code=status.HTTP_201_CREATED)
        async def place_order(order: OrderRequest):
            """
            Places an order: Factory mints the cake, Decorator adds toppings,
            Observer notifies the dashboards
            """
            try:
                cake = self.coordinator.place_order(
                    order.kind,
                    order.size,
                    order.decorations,
                    order.customer,
                )
                return cake_to_response(cake)
            except (InvalidRequest, UnknownDecoration) as e:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=str(e)
                )
            except UnknownCombination as e:
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=f"Catalog misconfigured: {str(e)}"
                )

        @self.router.get("/", response_model=List[CakeResponse])
        async def list_orders():
            """Orders shown on the customer dashboard"""
            return [cake_to_response(c) for c in self.customer_dashboard.completed_orders()]

        @self.router.get("/decorations", response_model=List[DecorationResponse])
        async def list_decorations():
            """Decoration menu with current surcharges"""
            return [
                DecorationResponse(
                    kind=kind.value,
                    name=kind.display_name,
                    surcharge=float(DECORATION_SURCHARGES[kind]),
                )
                for kind in DecorationKind
                if kind in DECORATION_SURCHARGES
            ]

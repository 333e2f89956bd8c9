"""
Controller for the cake catalog (MVC)
Cake Shop - GoF Patterns
"""
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field
from typing import Dict, List

from ..exceptions import InvalidRequest, UnknownCombination
from ..patterns.cakes import CakeKind
from ..patterns.factory import CakeCatalog, resolve_kind, resolve_size


class PriceUpdate(BaseModel):
    """Schema for changing a base price"""
    price: float = Field(..., ge=0)

    class Config:
        json_schema_extra = {
            "example": {
                "price": 9.50
            }
        }


class PriceResponse(BaseModel):
    kind: str
    size: str
    display_name: str
    price: float


class CountsResponse(BaseModel):
    """Orders minted so far per cake kind"""
    counts: Dict[str, int]
    total: int


class CatalogController:
    """Controller for prices and order counters"""

    def __init__(self, catalog: CakeCatalog):
        self.router = APIRouter(prefix="/catalog", tags=["Catalog"])
        self.catalog = catalog
        self._setup_routes()

    def _price_response(self, kind, size, price) -> PriceResponse:
        return PriceResponse(
            kind=kind.value,
            size=size.value,
            display_name=f"{kind.display_name} ({size.display_name})",
            price=float(price),
        )

    def _setup_routes(self):
        """Sets up the controller routes"""

        @self.router.get("/prices", response_model=List[PriceResponse])
        async def list_prices():
            """Full price table"""
            table = self.catalog.price_table()
            return [self._price_response(kind, size, price) for (kind, size), price in table.items()]

        @self.router.get("/prices/{kind}/{size}", response_model=PriceResponse)
        async def get_price(kind: str, size: str):
            try:
                price = self.catalog.price_of(kind, size)
                return self._price_response(resolve_kind(kind), resolve_size(size), price)
            except InvalidRequest as e:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
            except UnknownCombination as e:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

        @self.router.put("/prices/{kind}/{size}", response_model=PriceResponse)
        async def set_price(kind: str, size: str, data: PriceUpdate):
            """Changes a base price; cakes already ordered keep their price"""
            try:
                price = self.catalog.set_price(kind, size, data.price)
                return self._price_response(resolve_kind(kind), resolve_size(size), price)
            except InvalidRequest as e:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        @self.router.post("/prices/reset", response_model=List[PriceResponse])
        async def reset_prices():
            """Restores the default price table"""
            self.catalog.reset_to_defaults()
            table = self.catalog.price_table()
            return [self._price_response(kind, size, price) for (kind, size), price in table.items()]

        @self.router.get("/counts", response_model=CountsResponse)
        async def get_counts():
            counts = {kind.value: self.catalog.count_for_kind(kind) for kind in CakeKind}
            return CountsResponse(counts=counts, total=sum(counts.values()))

from decimal import Decimal

from pydantic import BaseModel


class SellRequest(BaseModel):
    """
    Body of POST /api/Sellers/ListNewItem.

    Every field is optional here so that the use case, not the schema, decides
    which error a caller gets: a request with no token is a 401 whatever else
    is missing.
    """

    token: str | None = None
    type: int = 0
    name: str | None = None
    image: str | None = None
    condition: int = 0
    price: Decimal = Decimal("0")


class ItemResponse(BaseModel):
    id: int
    type: int
    name: str
    seller: str
    image: str
    condition: int
    price: Decimal

    model_config = {"from_attributes": True}

import re

from fastapi import APIRouter, Body, Depends, HTTPException, status

from src.api.dependencies import (
    get_item_by_id_use_case,
    get_items_by_category_use_case,
    get_list_new_item_use_case,
    get_search_items_use_case,
)
from src.api.schemas.item_schemas import ItemResponse, SellRequest
from src.application.use_cases.get_item_by_id import GetItemById, GetItemByIdInput
from src.application.use_cases.get_items_by_category import (
    GetItemsByCategory,
    GetItemsByCategoryInput,
)
from src.application.use_cases.list_new_item import ListNewItem, ListNewItemInput
from src.application.use_cases.search_items import SearchItems, SearchItemsInput
from src.domain.entities.item import Item
from src.domain.exceptions import AuthenticationError, ItemNotFoundError, ItemValidationError

router = APIRouter(prefix="/api/Sellers", tags=["sellers"])

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INT64_PATTERN = re.compile(r"-?[0-9]+")


def _item_to_response(item: Item) -> ItemResponse:
    return ItemResponse(
        id=item.id,
        type=item.type,
        name=item.name,
        seller=item.seller,
        image=item.image,
        condition=item.condition,
        price=item.price,
    )


@router.post("/ListNewItem", response_model=int)
async def list_new_item(
    body: SellRequest,
    use_case: ListNewItem = Depends(get_list_new_item_use_case),
) -> int:
    """Validate, authenticate, then store a new item. Returns its identifier."""
    try:
        result = await use_case.execute(
            ListNewItemInput(
                token=body.token,
                type=body.type,
                name=body.name,
                image=body.image,
                condition=body.condition,
                price=body.price,
            )
        )
    except AuthenticationError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc))
    except ItemValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return result.item_id


def _parse_int64(raw: str) -> int | None:
    if not _INT64_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    return value if _INT64_MIN <= value <= _INT64_MAX else None


@router.get("/GetById/{item_id}", response_model=ItemResponse)
async def get_by_id(
    item_id: str,
    use_case: GetItemById = Depends(get_item_by_id_use_case),
) -> ItemResponse:
    """Ids that are not 64-bit integers match no route target and report 404."""
    parsed = _parse_int64(item_id)
    if parsed is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    try:
        item = await use_case.execute(GetItemByIdInput(item_id=parsed))
    except ItemNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return _item_to_response(item)


@router.put("/GetBySearch", response_model=list[ItemResponse])
async def get_by_search(
    search: str = Body(),
    use_case: SearchItems = Depends(get_search_items_use_case),
) -> list[ItemResponse]:
    """Substring search on item names. The body is a bare JSON string."""
    try:
        items = await use_case.execute(SearchItemsInput(text=search))
    except ItemNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return [_item_to_response(i) for i in items]


@router.get("/GetByCategory/{type}", response_model=list[ItemResponse])
async def get_by_category(
    type: int,
    use_case: GetItemsByCategory = Depends(get_items_by_category_use_case),
) -> list[ItemResponse]:
    try:
        items = await use_case.execute(GetItemsByCategoryInput(type=type))
    except ItemValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except ItemNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return [_item_to_response(i) for i in items]

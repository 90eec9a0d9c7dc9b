from decimal import Decimal

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.item_repository import ItemRepository
from src.domain.entities.item import Item
from src.infrastructure.database.models import ItemModel


def _to_domain(model: ItemModel) -> Item:
    return Item(
        id=model.id,
        type=model.type,
        name=model.name,
        seller=model.seller,
        image=model.image,
        condition=model.condition,
        price=Decimal(str(model.price)),
    )


def _to_model(item: Item) -> ItemModel:
    return ItemModel(
        id=item.id,
        type=item.type,
        name=item.name,
        seller=item.seller,
        image=item.image,
        condition=item.condition,
        price=item.price,
    )


def build_search_query(text: str) -> Select:
    # Case-insensitive literal substring; autoescape neutralises % and _ in `text`
    return select(ItemModel).where(ItemModel.name.icontains(text, autoescape=True))


def build_type_query(type_code: int) -> Select:
    return select(ItemModel).where(ItemModel.type == type_code)


class SqlAlchemyItemRepository(ItemRepository):
    """SQLAlchemy-backed implementation of ItemRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, item: Item) -> None:
        self._session.add(_to_model(item))
        await self._session.flush()

    async def get_by_id(self, item_id: int) -> Item | None:
        model = await self._session.get(ItemModel, item_id)
        return _to_domain(model) if model is not None else None

    async def search_by_name(self, text: str) -> list[Item]:
        result = await self._session.execute(build_search_query(text))
        return [_to_domain(m) for m in result.scalars().all()]

    async def list_by_type(self, type_code: int) -> list[Item]:
        result = await self._session.execute(build_type_query(type_code))
        return [_to_domain(m) for m in result.scalars().all()]

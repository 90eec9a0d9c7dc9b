"""
FastAPI dependency injection wiring.

Each dependency function returns a fully-constructed object with its
collaborators injected, so route handlers stay thin. Sessions come from
the shared pooled engine; nothing here opens its own connection.
"""
from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.item_repository import ItemRepository
from src.application.interfaces.token_repository import TokenRepository
from src.application.use_cases.get_item_by_id import GetItemById
from src.application.use_cases.get_items_by_category import GetItemsByCategory
from src.application.use_cases.list_new_item import ListNewItem
from src.application.use_cases.search_items import SearchItems
from src.infrastructure.database.connection import get_db_session
from src.infrastructure.database.repositories.item_repository import SqlAlchemyItemRepository
from src.infrastructure.database.repositories.token_repository import (
    SqlAlchemyTokenRepository,
)


# ---- Low-level dependencies ------------------------------------------------

async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async for session in get_db_session():
        yield session


def get_item_repo(session: AsyncSession = Depends(get_session)) -> ItemRepository:
    return SqlAlchemyItemRepository(session)


def get_token_repo(session: AsyncSession = Depends(get_session)) -> TokenRepository:
    return SqlAlchemyTokenRepository(session)


# ---- Use-case dependencies -------------------------------------------------

def get_list_new_item_use_case(
    item_repo: ItemRepository = Depends(get_item_repo),
    token_repo: TokenRepository = Depends(get_token_repo),
) -> ListNewItem:
    return ListNewItem(item_repo, token_repo)


def get_item_by_id_use_case(
    item_repo: ItemRepository = Depends(get_item_repo),
) -> GetItemById:
    return GetItemById(item_repo)


def get_search_items_use_case(
    item_repo: ItemRepository = Depends(get_item_repo),
) -> SearchItems:
    return SearchItems(item_repo)


def get_items_by_category_use_case(
    item_repo: ItemRepository = Depends(get_item_repo),
) -> GetItemsByCategory:
    return GetItemsByCategory(item_repo)

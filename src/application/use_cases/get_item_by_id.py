from dataclasses import dataclass

import structlog

from src.application.interfaces.item_repository import ItemRepository
from src.domain.entities.item import Item
from src.domain.exceptions import ItemNotFoundError

logger = structlog.get_logger(__name__)


@dataclass
class GetItemByIdInput:
    item_id: int


class GetItemById:
    """Use case: Fetch a single listed item by its identifier."""

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    async def execute(self, input_data: GetItemByIdInput) -> Item:
        item = await self._item_repo.get_by_id(input_data.item_id)
        if item is None:
            logger.info("item_not_found", item_id=input_data.item_id)
            raise ItemNotFoundError(f"id {input_data.item_id}")
        return item

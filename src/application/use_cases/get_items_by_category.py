from dataclasses import dataclass

import structlog

from src.application.interfaces.item_repository import ItemRepository
from src.domain.entities.item import Item
from src.domain.enums.item_category import (
    MAX_CATEGORY_CODE,
    MIN_CATEGORY_CODE,
    is_recognised_category,
)
from src.domain.exceptions import ItemNotFoundError, ItemValidationError

logger = structlog.get_logger(__name__)


@dataclass
class GetItemsByCategoryInput:
    type: int


class GetItemsByCategory:
    """Use case: List every item in one category."""

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    async def execute(self, input_data: GetItemsByCategoryInput) -> list[Item]:
        if not is_recognised_category(input_data.type):
            raise ItemValidationError(
                "type",
                f"category code must be between {MIN_CATEGORY_CODE} and {MAX_CATEGORY_CODE}",
            )

        items = await self._item_repo.list_by_type(input_data.type)
        if not items:
            logger.info("category_empty", type=input_data.type)
            raise ItemNotFoundError(f"category {input_data.type}")
        return items

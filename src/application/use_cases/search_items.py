from dataclasses import dataclass

import structlog

from src.application.interfaces.item_repository import ItemRepository
from src.domain.entities.item import Item
from src.domain.exceptions import ItemNotFoundError

logger = structlog.get_logger(__name__)


@dataclass
class SearchItemsInput:
    text: str


class SearchItems:
    """
    Use case: Find items whose name contains the given text.

    The text is matched literally, so `%` and `_` typed by a user are not
    treated as wildcards. An empty result is reported as not found.
    """

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    async def execute(self, input_data: SearchItemsInput) -> list[Item]:
        items = await self._item_repo.search_by_name(input_data.text)
        logger.info("items_searched", text=input_data.text, matches=len(items))
        if not items:
            raise ItemNotFoundError(f"name containing {input_data.text!r}")
        return items

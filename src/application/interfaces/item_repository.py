from abc import ABC, abstractmethod

from src.domain.entities.item import Item


class ItemRepository(ABC):
    """Port for persisting and querying marketplace items."""

    @abstractmethod
    async def add(self, item: Item) -> None:
        """Insert a new item. No existence check is made before the insert."""
        ...

    @abstractmethod
    async def get_by_id(self, item_id: int) -> Item | None:
        ...

    @abstractmethod
    async def search_by_name(self, text: str) -> list[Item]:
        """Return items whose name contains `text` as a literal substring."""
        ...

    @abstractmethod
    async def list_by_type(self, type_code: int) -> list[Item]:
        ...

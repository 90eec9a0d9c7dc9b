from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

import structlog

from src.application.interfaces.item_repository import ItemRepository
from src.application.interfaces.token_repository import TokenRepository
from src.domain.entities.item import MAX_CODE, MAX_PRICE, MIN_CODE, Item, round_price
from src.domain.enums.item_category import UNSET_CODE
from src.domain.exceptions import AuthenticationError, ItemValidationError
from src.domain.services.item_id_generator import generate_item_id

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ListNewItemInput:
    token: str | None
    type: int
    name: str | None
    image: str | None
    condition: int
    price: Decimal


@dataclass
class ListNewItemOutput:
    item_id: int
    seller: str


class ListNewItem:
    """
    Use case: Put a new item up for sale.

    Validates the request, resolves the seller from the bearer token, assigns
    a random 64-bit identifier and stores the item. The seller is always the
    token's owner; a client cannot list on someone else's behalf.
    """

    def __init__(
        self,
        item_repo: ItemRepository,
        token_repo: TokenRepository,
        *,
        clock: Callable[[], datetime] = _utcnow,
        id_generator: Callable[[], int] = generate_item_id,
    ) -> None:
        self._item_repo = item_repo
        self._token_repo = token_repo
        self._clock = clock
        self._id_generator = id_generator

    async def execute(self, input_data: ListNewItemInput) -> ListNewItemOutput:
        self._validate(input_data)

        # _validate guarantees a non-empty token
        seller = await self._authenticate(input_data.token)  # type: ignore[arg-type]

        item = Item.create_listing(
            item_id=self._id_generator(),
            type=input_data.type,
            name=input_data.name,  # type: ignore[arg-type]
            seller=seller,
            image=input_data.image,
            condition=input_data.condition,
            price=input_data.price,
        )

        # Store failures propagate untouched
        await self._item_repo.add(item)

        logger.info(
            "item_listed",
            item_id=item.id,
            seller=seller,
            type=item.type,
            price=str(item.price),
        )

        return ListNewItemOutput(item_id=item.id, seller=seller)

    @staticmethod
    def _validate(input_data: ListNewItemInput) -> None:
        if not input_data.token:
            logger.info("item_listing_unauthenticated", reason="missing_token")
            raise AuthenticationError("missing token")
        if input_data.type == UNSET_CODE:
            raise _rejected("type", "category code must be non-zero")
        if not MIN_CODE <= input_data.type <= MAX_CODE:
            raise _rejected("type", f"category code must be between {MIN_CODE} and {MAX_CODE}")
        if not input_data.name:
            raise _rejected("name", "must not be empty")
        if input_data.condition == UNSET_CODE:
            raise _rejected("condition", "condition code must be non-zero")
        if not MIN_CODE <= input_data.condition <= MAX_CODE:
            raise _rejected(
                "condition", f"condition code must be between {MIN_CODE} and {MAX_CODE}"
            )
        if not input_data.price.is_finite():
            raise _rejected("price", "must be a finite amount")
        if input_data.price < 0:
            raise _rejected("price", "must not be negative")
        try:
            rounded = round_price(input_data.price)
        except InvalidOperation:
            raise _rejected("price", "is not a representable amount") from None
        if rounded > MAX_PRICE:
            raise _rejected("price", f"must not exceed {MAX_PRICE}")

    async def _authenticate(self, token: str) -> str:
        auth_token = await self._token_repo.get_by_token(token)
        if auth_token is None:
            logger.info("item_listing_unauthenticated", reason="unknown_token")
            raise AuthenticationError("unknown token")
        if not auth_token.is_valid_at(self._clock()):
            logger.info(
                "item_listing_unauthenticated",
                reason="expired_token",
                username=auth_token.username,
            )
            raise AuthenticationError("token expired")
        return auth_token.username


def _rejected(field: str, message: str) -> ItemValidationError:
    logger.info("item_listing_rejected", field=field, reason=message)
    return ItemValidationError(field, message)

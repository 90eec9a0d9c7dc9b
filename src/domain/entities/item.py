from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

NO_IMAGE = "[ NONE ]"

# Storage limits: codes are SMALLINT, prices NUMERIC(12, 2)
MIN_CODE = -(2**15)
MAX_CODE = 2**15 - 1
MAX_PRICE = Decimal("9999999999.99")

_CENTS = Decimal("0.01")


def round_price(price: Decimal) -> Decimal:
    """
    Round to two fractional digits, halves away from zero (19.995 -> 20.00).

    Raises decimal.InvalidOperation when the result cannot be represented.
    """
    return Decimal(price).quantize(_CENTS, rounding=ROUND_HALF_UP)


@dataclass
class Item:
    """
    An item offered for sale on the marketplace.

    Items are immutable once listed: this service creates them and reads them
    back, nothing else.
    """

    id: int
    type: int
    name: str
    seller: str
    image: str
    condition: int
    price: Decimal

    # -------------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------------

    @classmethod
    def create_listing(
        cls,
        *,
        item_id: int,
        type: int,
        name: str,
        seller: str,
        image: str | None,
        condition: int,
        price: Decimal,
    ) -> "Item":
        """Build a new listing, applying the image placeholder and price rounding."""
        return cls(
            id=item_id,
            type=type,
            name=name,
            seller=seller,
            image=image or NO_IMAGE,
            condition=condition,
            price=round_price(price),
        )

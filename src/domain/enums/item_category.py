"""Closed range of category codes the marketplace recognises."""

MIN_CATEGORY_CODE = -2
MAX_CATEGORY_CODE = 6

# Zero is within the range but is never a valid code for a new listing.
UNSET_CODE = 0


def is_recognised_category(code: int) -> bool:
    return MIN_CATEGORY_CODE <= code <= MAX_CATEGORY_CODE
